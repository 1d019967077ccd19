"""
Main FastAPI application (entrypoint).

Responsibilities:
- Wire the reference data router
- Register centralized exception handlers
- Provide middleware: CORS, request-id logging
Run with `python main.py` for local dev, or `uvicorn main:app` elsewhere.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from api import routes
from config.settings import settings
from core.exception_handlers import register_exception_handlers
from core.logging import configure_logging, request_logging_middleware


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.API_TITLE, version=settings.API_VERSION, description=settings.API_DESCRIPTION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(routes.router, tags=["reference"])

    register_exception_handlers(app)

    # Adds X-Request-ID header and logs every request
    app.middleware("http")(request_logging_middleware)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
