from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health():
    from forex_risk.main import config_engine

    reference_loaded = config_engine is not None
    return {
        "status": "ok" if reference_loaded else "not_ready",
        "reference_data_loaded": reference_loaded,
    }
