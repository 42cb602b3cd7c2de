import pytest
import random
import string
import httpx
from asgi_lifespan import LifespanManager

from backend.app import create_app_with_db
from backend.core.config import get_setting
from backend.core.db import Database, Base

SETTINGS = get_setting()


def generate_string(length) -> str:
    characters = string.ascii_letters + string.digits
    random_string = ''.join(random.choice(characters) for _ in range(length))
    return random_string


@pytest.fixture(autouse=True)
async def reset_test_db():
    """
    test 이전에 db를 초기화한다
    """
    db_ = Database()
    db_.init_db(SETTINGS.TEST_DB_URL)
    async with db_.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    await db_.disconnect()


@pytest.fixture
async def test_app():
    return create_app_with_db(db_url=SETTINGS.TEST_DB_URL)


@pytest.fixture
async def test_client(test_app):
    """
    create test client
    """
    async with LifespanManager(test_app):
        transport = httpx.ASGITransport(app=test_app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as test_client:
            yield test_client


@pytest.fixture
async def test_db():
    """
    테스트 데이터를 직접 넣고 확인하기 위한 Database
    """
    db_ = Database()
    db_.init_db(SETTINGS.TEST_DB_URL)
    yield db_
    await db_.disconnect()


@pytest.fixture
async def broken_db():
    """
    flavors 테이블이 없는 store (모든 flavor 쿼리가 실패)
    """
    db_ = Database()
    db_.init_db('sqlite+aiosqlite:///:memory:')
    yield db_
    await db_.disconnect()


@pytest.fixture
async def basic_flavor(test_db: Database):
    """
    updated_at이 과거인 기본 flavor
    :return: flavor row
    """
    rows = await test_db.execute(
        "INSERT INTO flavors (name, is_favorite, updated_at) VALUES (:name, :is_favorite, :updated_at) RETURNING *",
        {'name': 'Vanilla', 'is_favorite': True, 'updated_at': '2000-01-01 00:00:00'}
    )
    yield rows[0]


@pytest.fixture
async def another_flavor(test_db: Database):
    rows = await test_db.execute(
        "INSERT INTO flavors (name, is_favorite) VALUES (:name, :is_favorite) RETURNING *",
        {'name': 'Chocolate', 'is_favorite': False}
    )
    yield rows[0]
