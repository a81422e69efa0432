class InvalidParameterError(ValueError):
    """Raised when an input lies outside the domain of an IRT function."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
