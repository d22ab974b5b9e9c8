from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.router import api_router
from app.core.config import Settings, log_config, settings
from app.core.database import build_engine, build_session_factory, init_db
from app.core.handlers import register_exception_handlers
from app.core.logging import setup_logging


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Build the API with its own engine and session factory.
    """
    config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(app.state.engine, config)
        yield
        app.state.engine.dispose()

    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.APP_VERSION,
        debug=config.DEBUG,
        lifespan=lifespan,
    )

    app.state.settings = config
    app.state.engine = build_engine(config)
    app.state.session_factory = build_session_factory(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix=config.API_V1_PREFIX)

    @app.get("/")
    def root():
        """
        Health check endpoint
        """
        return {
            "message": "Welcome to MD Cerámica API",
            "docs": "/docs",
            "version": config.APP_VERSION
        }

    return app


setup_logging(settings.LOG_LEVEL)
if settings.DEBUG:
    log_config(settings)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
