""" Main file for the project """
import os

from fastapi import FastAPI

from flatsketch.configs.environment import get_environment_settings
from flatsketch.configs.logging import get_logger
from flatsketch.configs.logging_config import setup_logging_for
from flatsketch.routers.errors import register_exception_handlers
from flatsketch.routers.v1.flat_sketch import FlatSketchRouter, get_flat_sketch_service

# Get environment settings
env = get_environment_settings()

# Setup logging
setup_logging_for(os.getenv("ENV"), env)
logger = get_logger(__name__)
logger.info("Environment settings loaded successfully")


def create_app() -> FastAPI:
    """Собирает FastAPI-приложение со всеми роутерами и обработчиками."""
    application = FastAPI(
        title="FashionFlat AI",
        description="API for generating technical flat sketches and construction details",
        version="0.1.0",
    )
    register_exception_handlers(application)
    application.include_router(FlatSketchRouter)

    @application.on_event("startup")
    async def startup_event() -> None:
        """Startup event handler."""
        for name in ("ANTHROPIC_API_KEY", "HUGGINGFACE_API_KEY"):
            if not getattr(env, name):
                logger.warning(f"{name} is not configured, generation requests will fail")
        get_flat_sketch_service()
        logger.info("Application startup completed")

    @application.on_event("shutdown")
    async def shutdown_event() -> None:
        """Shutdown event handler."""
        logger.info("Application shutdown initiated")
        if get_flat_sketch_service.cache_info().currsize:
            await get_flat_sketch_service().aclose()
            get_flat_sketch_service.cache_clear()

    return application


# Initialize FastAPI app
app = create_app()
logger.info("FastAPI application initialized")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
