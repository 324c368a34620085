# goraeph/main.py

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from goraeph.core.config import settings
from goraeph.core.errors import register_exception_handlers
from goraeph.core.logging_config import setup_logging
from goraeph.api.v1.api import api_router
from goraeph.db.init_db import init_db

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.DESCRIPTION,
        version=settings.VERSION,
        docs_url=settings.docs_url,
        debug=settings.debug,
    )

    # ---------- CORS ----------
    origins = [str(origin).rstrip("/") for origin in settings.backend_cors_origins]
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # ---------- ERRORS ----------
    register_exception_handlers(app)

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.on_event("startup")
    def startup_event() -> None:
        init_db()

    @app.get("/", tags=["info"])
    def root() -> dict:
        return {
            "name": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "docs": settings.docs_url,
        }

    @app.get("/healthz", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    logger.info("Listening on http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
