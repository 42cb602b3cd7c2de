from typing import Any, Dict, List, Optional
from fastapi import Depends

from backend.core.db import Database
from backend.core.dependency import get_db


class BaseRepository:
    def __init__(self, db: Database = Depends(get_db)):
        self.db = db

    async def fetch_all(self, sql: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        return await self.db.execute(sql, params)

    async def fetch_one(self, sql: str, params: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        # 여러 row가 반환되더라도 첫번째 row만 사용
        rows = await self.db.execute(sql, params)
        return rows[0] if rows else None
