"""HTTP service entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from . import __version__
from .api.router import init_router, router
from .config import AppConfig, load_default_config
from .state.facility import Facility

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def build_facility(config: AppConfig) -> Facility:
    """Create a facility sized and priced from configuration."""
    return Facility(
        car_capacity=config.facility.car_capacity,
        motorcycle_capacity=config.facility.motorcycle_capacity,
        schedule=config.pricing.to_schedule(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Valet Parking service...")

    config = load_default_config()
    logging.getLogger().setLevel(config.logging.level)

    init_router(build_facility(config))

    logger.info(f"Valet Parking ready on http://{config.api.host}:{config.api.port}")

    yield  # Application runs here

    logger.info("Shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Valet Parking",
    description="API for admitting vehicles, releasing slots and charging parking fees",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(router, prefix="/api/v1")


def main():
    """Run the application."""
    config = load_default_config()

    uvicorn.run(
        "valet_parking.main:app",
        host=config.api.host,
        port=config.api.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
