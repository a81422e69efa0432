from pydantic_settings import BaseSettings

ABILITY_ENV_PREFIX = "ABILITY_"


class ApiSettings(BaseSettings):
    model_config = {"env_prefix": ABILITY_ENV_PREFIX}

    max_responses: int = 1000
    max_abilities: int = 1000
    host: str = "127.0.0.1"
    port: int = 8000
