from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from campus_events.api.errors import register_exception_handlers
from campus_events.api.router import router as api_router
from campus_events.core.config import Settings, settings
from campus_events.core.logging import configure_logging
from campus_events.db import Database, build_database
from campus_events.middleware.request_id import RequestIdMiddleware
from campus_events.middleware.security_headers import SecurityHeadersMiddleware


def create_app(app_settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    app_settings = app_settings or settings
    configure_logging(app_settings.log_level, json=app_settings.env != "local")

    app = FastAPI(title="Campus Events API")
    app.state.settings = app_settings
    app.state.database = database or build_database(app_settings)

    # Starlette runs the LAST added middleware FIRST (outermost), so request ids
    # and security headers also cover CORS preflight responses.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware, settings=app_settings)
    app.add_middleware(RequestIdMiddleware)

    register_exception_handlers(app)

    Instrumentator().instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)

    @app.get("/")
    def root():
        return {"name": "Campus Events API", "status": "ok"}

    @app.get("/health")
    def health(request: Request):
        return {
            "status": "ok",
            "database_configured": request.app.state.database.is_configured,
        }

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
