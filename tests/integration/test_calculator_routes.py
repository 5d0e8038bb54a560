import pytest


SCENARIO_A = {
    "account_balance": 10000,
    "account_currency": "USD",
    "risk_percentage": 1,
    "trade_direction": "Buy",
    "currency_pair": "EUR/USD",
    "entry_price": 1.0850,
    "stop_loss_price": 1.0800,
    "pip_value_mode": "standard",
    "custom_pip_value": 10.00,
}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_calculate_scenario_a(client):
    resp = await client.post("/api/v1/calculator/calculate", json=SCENARIO_A)
    assert resp.status_code == 200
    data = resp.json()

    assert data["risk_amount"] == pytest.approx(100.0)
    assert data["stop_distance_pips"] == pytest.approx(50.0)
    assert data["pip_value"] == pytest.approx(10.0)
    assert data["position_size"] == pytest.approx(0.2)
    assert data["risk_level"] == "beginner"
    assert data["risk_level_label"] == "Beginner Safe Zone"
    assert data["currency_symbol"] == "$"
    assert data["validation_errors"] == []
    assert data["calculated_successfully"] is True
    assert data["stop_recommendation"] == {
        "min_pips": 40,
        "max_pips": 60,
        "message": "Wider stops help avoid market noise while learning",
    }
    assert data["stop_assessment"]["status"] == "good"
    assert data["break_even_price"] == pytest.approx(1.0851)
    assert list(data["profit_targets"].keys()) == ["1:1", "2:1", "3:1"]
    assert data["profit_targets"]["2:1"]["target_price"] == pytest.approx(1.0950)
    assert data["profit_targets"]["3:1"]["projected_profit"] == pytest.approx(300.0)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_calculate_reports_domain_errors_with_200(client):
    body = dict(SCENARIO_A, stop_loss_price=1.0900)

    resp = await client.post("/api/v1/calculator/calculate", json=body)
    assert resp.status_code == 200
    data = resp.json()

    assert data["validation_errors"] == ["Stop loss must be below entry price for long trades"]
    assert data["position_size"] == 0
    assert data["calculated_successfully"] is False


@pytest.mark.asyncio
@pytest.mark.integration
async def test_calculate_custom_pip_value_in_eur(client):
    body = dict(SCENARIO_A, account_currency="EUR", pip_value_mode="custom", custom_pip_value=0.05)

    resp = await client.post("/api/v1/calculator/calculate", json=body)
    data = resp.json()

    assert data["currency_symbol"] == "€"
    assert data["pip_value"] == pytest.approx(0.05)
    assert data["validation_errors"][0] == "Custom pip value must be between €0.10 and €100.00"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_calculate_rejects_malformed_body(client):
    body = dict(SCENARIO_A, trade_direction="Hold")

    resp = await client.post("/api/v1/calculator/calculate", json=body)
    assert resp.status_code == 422

    resp = await client.post("/api/v1/calculator/calculate", json=dict(SCENARIO_A, account_balance="lots"))
    assert resp.status_code == 422


@pytest.mark.asyncio
@pytest.mark.integration
async def test_defaults(client):
    resp = await client.get("/api/v1/calculator/defaults")
    assert resp.status_code == 200
    data = resp.json()

    assert data["account_currency"] == "USD"
    assert data["trade_direction"] == "Buy"
    assert data["currency_pair"] == "EUR/USD"
    assert data["pip_value_mode"] == "standard"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_summary_for_actionable_setup(client):
    resp = await client.post("/api/v1/calculator/summary", json=SCENARIO_A)
    assert resp.status_code == 200
    data = resp.json()

    lines = data["summary"].split("\n")
    assert lines[0] == "FOREX TRADE SETUP"
    assert "Position Size: 0.20 lots" in lines
    assert "1:1 R:R - 1.09000 ($100.00)" in lines
    assert lines[-1].startswith("Generated: ")
    assert data["position_size"] == pytest.approx(0.2)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_summary_refused_when_not_actionable(client):
    body = dict(SCENARIO_A, trade_direction="Sell")

    resp = await client.post("/api/v1/calculator/summary", json=body)
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert detail["validation_errors"] == ["Stop loss must be above entry price for short trades"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["reference_data_loaded"] is True
