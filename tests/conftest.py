from pathlib import Path
from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from forex_risk.api.routes import calculator, health, reference
from forex_risk.domain.services.config_engine import ConfigEngine
from forex_risk.domain.services.risk_engine import RiskEngine
import forex_risk.main as app_main


CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"


@pytest.fixture(scope="session")
def config_dir() -> Path:
    return CONFIG_DIR


@pytest.fixture(scope="session")
def config_engine(config_dir) -> ConfigEngine:
    engine = ConfigEngine(config_dir)
    engine.load_all()
    return engine


@pytest.fixture()
def risk_engine(config_engine) -> RiskEngine:
    return RiskEngine(
        pip_value_table=config_engine.pip_value_table,
        stop_loss_table=config_engine.stop_loss_table,
    )


@pytest.fixture()
def app(config_engine, monkeypatch) -> FastAPI:
    app = FastAPI()
    app.include_router(health.router, tags=["Health"])
    app.include_router(calculator.router, prefix="/api/v1/calculator", tags=["Calculator"])
    app.include_router(reference.router, prefix="/api/v1/reference", tags=["Reference Data"])

    # Lifespan does not run under ASGITransport; wire the globals directly
    monkeypatch.setattr(app_main, "config_engine", config_engine)
    monkeypatch.setattr(app_main, "risk_engine", app_main.build_risk_engine(config_engine))

    return app


@pytest.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
