import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncAttrs, AsyncEngine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase

from backend.core.config import get_setting
from backend.core.exception import StoreException

SETTINGS = get_setting()

logger = logging.getLogger(__name__)


class Base(AsyncAttrs, DeclarativeBase):
    pass


class Database:
    """
    db와 관련한 설정 및 query 실행을 담당하는 클래스

    engine : AsyncEngine

    init_db시, DB_URL을 받아서 engine을 초기화
    app 생성시 인스턴스를 주입하여 사용한다 (create_app 참고)
    """

    def __init__(self):
        self.__engine = None

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self.__engine

    def init_db(self, DB_URL: str):
        self.__engine = create_async_engine(
            DB_URL, echo=SETTINGS.DB_ECHO_LOG_ENABLED)

    async def disconnect(self):
        if self.__engine is not None:
            await self.__engine.dispose()

    async def execute(self, sql: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        parameterized sql 하나를 실행하고 결과 row들을 dict list로 반환
        - 한 문장마다 별도의 트랜잭션으로 실행 후 commit
        - row를 반환하지 않는 문장(DELETE 등)은 빈 list
        :raises StoreException: 실행 중 발생한 모든 DB 오류
        """
        try:
            async with self.__engine.begin() as conn:
                result = await conn.execute(text(sql), params or {})
                if not result.returns_rows:
                    return []
                return [dict(row) for row in result.mappings().all()]
        except (SQLAlchemyError, OSError) as err:
            logger.error(f'query failed - "{sql}"')
            logger.error(err)
            raise StoreException(err, sql=sql) from err
