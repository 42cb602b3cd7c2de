from fastapi import APIRouter, Depends

from backend.core.db import Database
from backend.core.dependency import get_db
from backend.util.constant import RESPONSE_HEALTHCHECK_OK

router = APIRouter(prefix="/healthcheck", tags=["healthcheck"])


@router.get('')
async def health_check(db: Database = Depends(get_db)):
    """
    perform health check
    1. db 연결 (SELECT 1)
    """
    rows = await db.execute('SELECT 1 AS ok')
    assert rows[0]['ok'] == 1
    return {'status': RESPONSE_HEALTHCHECK_OK}
