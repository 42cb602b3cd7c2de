from typing import Any, Dict, List, Optional

from backend.repository.base import BaseRepository

# path의 id는 검증 없이 text parameter로 전달되고, 정수 변환은 DB가 수행한다
WHERE_ID = 'id = CAST(CAST(:id AS TEXT) AS INTEGER)'


class FlavorRepository(BaseRepository):
    async def find_flavors(self) -> List[Dict[str, Any]]:
        return await self.fetch_all('SELECT * FROM flavors')

    async def find_flavor_by_id(self, id: str) -> Optional[Dict[str, Any]]:
        return await self.fetch_one(f'SELECT * FROM flavors WHERE {WHERE_ID}', {'id': id})

    async def insert_flavor(self, name: Any, is_favorite: Any) -> Optional[Dict[str, Any]]:
        """
        flavor를 추가하고 생성된 row를 반환
        """
        return await self.fetch_one(
            'INSERT INTO flavors (name, is_favorite) VALUES (:name, :is_favorite) RETURNING *',
            {'name': name, 'is_favorite': is_favorite}
        )

    async def update_flavor_by_id(self, id: str, name: Any, is_favorite: Any) -> Optional[Dict[str, Any]]:
        """
        name, is_favorite를 변경하고 updated_at을 DB의 현재 시간으로 갱신
        :return: 변경된 row (해당 id가 없다면 None)
        """
        return await self.fetch_one(
            'UPDATE flavors SET name = :name, is_favorite = :is_favorite, updated_at = CURRENT_TIMESTAMP '
            f'WHERE {WHERE_ID} RETURNING *',
            {'name': name, 'is_favorite': is_favorite, 'id': id}
        )

    async def delete_flavor_by_id(self, id: str) -> None:
        await self.db.execute(f'DELETE FROM flavors WHERE {WHERE_ID}', {'id': id})
