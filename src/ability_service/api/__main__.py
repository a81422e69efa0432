import logging

import uvicorn

from ability_service.api.app import create_app
from ability_service.api.dependencies import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    logger.info(
        f"Serving ability estimation API on {settings.host}:{settings.port}"
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
