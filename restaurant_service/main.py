import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from restaurant_service.config import Settings, setup_logging
from restaurant_service.database import Store, create_db_engine, init_db
from restaurant_service.resources import RESOURCES
from restaurant_service.routes import build_router

logger = logging.getLogger(__name__)


def create_app(settings=None):
    settings = settings or Settings()
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # The store lives exactly as long as the application
        store = Store(create_db_engine(settings.database_url))
        try:
            if settings.create_tables:
                init_db(store.engine)
            app.state.store = store
            logger.info("Restaurant API ready")
            yield
        finally:
            store.dispose()

    app = FastAPI(
        title="Restaurant API",
        lifespan=lifespan,
        docs_url="/api-docs",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for resource in RESOURCES:
        app.include_router(build_router(resource), prefix=settings.api_prefix)

    @app.get("/", response_class=PlainTextResponse)
    def alive():
        return "Restaurant API alive"

    return app


app = create_app()

if __name__ == "__main__":
    _settings = app.state.settings
    logger.info(f"Servidor corriendo en http://localhost:{_settings.port}")
    logger.info(f"Documentación disponible en http://localhost:{_settings.port}/api-docs")
    uvicorn.run(app, host="0.0.0.0", port=_settings.port)
