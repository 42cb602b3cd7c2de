from backend.core.db import Database
from backend.repository.flavor import FlavorRepository


async def test_find_by_id(test_db: Database, basic_flavor: dict):
    """
    정상 경우 조회 가능 (path 문자열 그대로)
    """
    flavorRepository = FlavorRepository(db=test_db)
    flavor = await flavorRepository.find_flavor_by_id(id=str(basic_flavor['id']))
    assert flavor['name'] == basic_flavor['name']


async def test_find_by_id_not_found(test_db: Database):
    flavorRepository = FlavorRepository(db=test_db)
    assert await flavorRepository.find_flavor_by_id(id='999') is None
    assert await flavorRepository.find_flavor_by_id(id='not-a-number') is None


async def test_fetch_one_first_row(test_db: Database, basic_flavor: dict, another_flavor: dict):
    """
    여러 row가 반환되면 첫번째 row만 사용
    """
    flavorRepository = FlavorRepository(db=test_db)
    flavor = await flavorRepository.fetch_one('SELECT * FROM flavors ORDER BY id DESC')
    assert flavor['id'] == another_flavor['id']


async def test_update_deleted_flavor(test_db: Database, basic_flavor: dict):
    """
    확인 이후 삭제된 경우, 변경되는 row 없이 None
    """
    flavorRepository = FlavorRepository(db=test_db)
    await flavorRepository.delete_flavor_by_id(id=str(basic_flavor['id']))
    flavor = await flavorRepository.update_flavor_by_id(id=str(basic_flavor['id']), name='Vanilla Bean',
                                                        is_favorite=False)
    assert flavor is None
    assert await flavorRepository.find_flavors() == []


async def test_find_by_id_leading_zero(test_db: Database, basic_flavor: dict):
    """
    id의 정수 변환은 DB가 수행한다 ('01' -> 1)
    """
    flavorRepository = FlavorRepository(db=test_db)
    flavor = await flavorRepository.find_flavor_by_id(id=f'0{basic_flavor["id"]}')
    assert flavor['id'] == basic_flavor['id']
