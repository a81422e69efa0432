from functools import lru_cache

from fastapi import Request

from ability_service.api.config import ApiSettings


@lru_cache(maxsize=1)
def get_settings() -> ApiSettings:
    return ApiSettings()


def get_app_settings(request: Request) -> ApiSettings:
    settings: ApiSettings = request.app.state.settings
    return settings


def get_version() -> str:
    from ability_service.irt.estimation.config import _get_project_version

    return _get_project_version()
