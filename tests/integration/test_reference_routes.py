import pytest


@pytest.mark.asyncio
@pytest.mark.integration
async def test_pairs_exposes_category_and_multiplier(client):
    resp = await client.get("/api/v1/reference/pairs")
    assert resp.status_code == 200
    data = resp.json()

    assert len(data) == 8
    by_symbol = {d["symbol"]: d for d in data}
    assert by_symbol["EUR/JPY"]["category"] == "cross"
    assert by_symbol["EUR/JPY"]["pip_multiplier"] == 100
    assert by_symbol["AUD/USD"]["pip_multiplier"] == 10000


@pytest.mark.asyncio
@pytest.mark.integration
async def test_pip_values_for_currency(client):
    resp = await client.get("/api/v1/reference/pip-values/eur")
    assert resp.status_code == 200
    data = resp.json()

    assert data["account_currency"] == "EUR"
    assert data["currency_symbol"] == "€"
    assert data["default_pip_value"] == pytest.approx(10.0)
    assert data["pip_values"]["USD/JPY"] == pytest.approx(7.5)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_pip_values_unknown_currency(client):
    resp = await client.get("/api/v1/reference/pip-values/CHF")
    assert resp.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_risk_levels(client):
    resp = await client.get("/api/v1/reference/risk-levels")
    assert resp.status_code == 200

    assert [d["level"] for d in resp.json()] == ["beginner", "experienced", "expert"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_stop_loss_bands(client):
    resp = await client.get("/api/v1/reference/stop-loss/experienced")
    assert resp.status_code == 200
    data = resp.json()

    assert data["risk_level"] == "experienced"
    assert data["recommendations"]["GBP/JPY"]["min_pips"] == 40
    assert data["recommendations"]["GBP/JPY"]["max_pips"] == 60

    resp = await client.get("/api/v1/reference/stop-loss/reckless")
    assert resp.status_code == 404
