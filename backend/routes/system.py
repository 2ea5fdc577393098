from fastapi import APIRouter

import config
import store
from storage.schema import initialize

router = APIRouter(tags=["system"])


@router.get("/")
def health():
    return {"status": "ok", "service": "download-station"}


@router.get("/api/init")
async def init_database():
    """
    Creates the tables and seeds the admin password / sample files if missing.
    Safe to call repeatedly.
    """
    return await initialize(store.database, seed_samples=config.SEED_SAMPLE_FILES)
