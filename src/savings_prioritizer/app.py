from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from savings_prioritizer.api.routes import analysis
from savings_prioritizer.core import settings
from savings_prioritizer.logger import get_logger, setup_logging
from savings_prioritizer.manager import SavingsAdvisor

logger = get_logger(__name__)


def create_app() -> FastAPI:
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Initializing services...")
        settings.log_environment()

        app.state.advisor = SavingsAdvisor()

        logger.info("Services initialized.")
        yield
        logger.info("Service shutting down.")

    app = FastAPI(title="Savings Prioritizer", lifespan=lifespan)
    app.include_router(analysis.router)

    return app


app = create_app()
