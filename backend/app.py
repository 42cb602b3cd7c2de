from fastapi import FastAPI
from contextlib import asynccontextmanager

from backend.core.exception_handler import register_error_handlers
from backend.core.db import Base, Database
from backend.api import api_router
import backend.model.flavor  # noqa: F401 (Base.metadata에 테이블 등록)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.db
    async with database.engine.begin() as conn:
        # 테이블이 없는 경우에만 생성
        await conn.run_sync(Base.metadata.create_all)
    yield
    await database.disconnect()


def create_app(database: Database) -> FastAPI:
    """
    return fastapi app
    - database: 요청 처리시 사용할 store (app.state.db로 주입)
    """
    app = FastAPI(lifespan=lifespan)
    app.state.db = database
    app.include_router(
        api_router,
        prefix=""
    )
    register_error_handlers(app)
    return app


def create_app_with_db(db_url: str) -> FastAPI:
    """
    return fastapi app with db
    - db_url: url of database
    """
    database = Database()
    database.init_db(db_url)
    return create_app(database)
