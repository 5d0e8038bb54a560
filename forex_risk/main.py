"""
FastAPI Main Application
Forex position sizing and risk calculator
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import AsyncGenerator
import logging

from forex_risk.config import settings
from forex_risk.core.logging import setup_logging
from forex_risk.domain.services.config_engine import ConfigEngine
from forex_risk.domain.services.risk_engine import RiskEngine

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

SERVICE_NAME = "Forex Risk Calculator"
VERSION = "1.0.0"


# Global instances
config_engine: ConfigEngine | None = None
risk_engine: RiskEngine | None = None


def build_risk_engine(engine: ConfigEngine) -> RiskEngine:
    """Risk engine over the loaded reference tables and configured limits"""
    return RiskEngine(
        pip_value_table=engine.pip_value_table,
        stop_loss_table=engine.stop_loss_table,
        max_position_lots=settings.MAX_POSITION_LOTS,
        min_position_lots=settings.MIN_POSITION_LOTS,
        custom_pip_value_min=settings.CUSTOM_PIP_VALUE_MIN,
        custom_pip_value_max=settings.CUSTOM_PIP_VALUE_MAX,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager
    Loads reference tables once at startup
    """
    global config_engine, risk_engine

    logger.info("=" * 60)
    logger.info(f"🚀 Starting {SERVICE_NAME}")
    logger.info("=" * 60)

    logger.info("⚙️  Loading reference data...")
    config_engine = ConfigEngine(settings.CONFIG_DIR)
    config_engine.load_all()
    logger.info(f"   📊 Currency pairs: {len(config_engine.pair_universe.pairs)}")
    logger.info(f"   💱 Account currencies: {', '.join(config_engine.pip_value_table.currencies)}")

    risk_engine = build_risk_engine(config_engine)
    logger.info(
        f"✅ Risk engine ready (lots {settings.MIN_POSITION_LOTS}-{settings.MAX_POSITION_LOTS}, "
        f"custom pip value {settings.CUSTOM_PIP_VALUE_MIN}-{settings.CUSTOM_PIP_VALUE_MAX})"
    )

    yield

    logger.info(f"👋 {SERVICE_NAME} shutdown complete")


# Create FastAPI app
app = FastAPI(
    title=SERVICE_NAME,
    description="Position size, pip value and profit targets from a trade setup",
    version=VERSION,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"💱 {SERVICE_NAME}",
        "version": VERSION,
        "docs": "/docs"
    }


# Import and include routers
from forex_risk.api.routes import calculator, health, reference

app.include_router(health.router, tags=["Health"])
app.include_router(calculator.router, prefix="/api/v1/calculator", tags=["Calculator"])
app.include_router(reference.router, prefix="/api/v1/reference", tags=["Reference Data"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("forex_risk.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEBUG)
