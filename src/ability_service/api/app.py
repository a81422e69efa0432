import uuid
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from ability_service.api.config import ApiSettings
from ability_service.api.dependencies import get_settings
from ability_service.api.errors import EXCEPTION_HANDLERS
from ability_service.api.routes import router


def create_app(settings: ApiSettings | None = None) -> FastAPI:
    if settings is None:
        settings = get_settings()

    app = FastAPI(title="Ability Estimation API")
    app.state.settings = settings

    for exc_type, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exc_type, handler)

    @app.middleware("http")
    async def attach_request_id(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = (
            request.headers.get("X-Request-ID") or uuid.uuid4().hex[:12]
        )
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    app.include_router(router)

    return app
