from typing import Any, Dict, List, Optional
from fastapi import Depends, status

from backend.core.exception import ApiServerException
from backend.repository.flavor import FlavorRepository
from backend.schema.flavor import FlavorRequest
from backend.util.constant import ERR_FLAVOR_NOT_FOUND


class FlavorService:
    def __init__(self, flavorRepository: FlavorRepository = Depends()):
        self.flavorRepository = flavorRepository

    async def get_flavors(self) -> List[Dict[str, Any]]:
        """
        모든 flavor list를 반환
        :return: flavor list
        """
        return await self.flavorRepository.find_flavors()

    async def get_flavor_by_id(self, id: str) -> Dict[str, Any]:
        """
        id(PK)로 flavor 조회
        :param id: 조회하려는 flavor의 id (path 그대로)
        :return: flavor
        :raises ApiServerException: 404(해당 flavor 없음)
        """
        flavor = await self.flavorRepository.find_flavor_by_id(id=id)
        if not flavor:
            raise ApiServerException(status=status.HTTP_404_NOT_FOUND, message=ERR_FLAVOR_NOT_FOUND,
                                     detail=f'flavor (id : {id}) not found')
        return flavor

    async def create_flavor(self, flavorRequest: Optional[FlavorRequest] = None) -> Optional[Dict[str, Any]]:
        """
        요청한 정보의 flavor를 생성
        - body가 없는 경우 모든 필드 None으로 전달
        :return: 생성된 flavor
        """
        if flavorRequest is None:
            flavorRequest = FlavorRequest()
        return await self.flavorRepository.insert_flavor(**flavorRequest.to_params())

    async def update_flavor_by_id(self, id: str,
                                  flavorRequest: Optional[FlavorRequest] = None) -> Optional[Dict[str, Any]]:
        """
        해당 id의 flavor 정보를 업데이트 한다
        - 확인과 변경은 별도의 문장으로 실행된다 (그 사이 삭제되었다면 None 반환)
        - body가 없어도 존재 여부를 먼저 확인한다
        :return: updated flavor
        :raises ApiServerException: 404(flavor 없는 경우)
        """
        await self.get_flavor_by_id(id=id)
        if flavorRequest is None:
            flavorRequest = FlavorRequest()
        return await self.flavorRepository.update_flavor_by_id(id=id, **flavorRequest.to_params())

    async def delete_flavor_by_id(self, id: str) -> None:
        """
        :param id: flavor id
        :return: None
        :raises ApiServerException: 404(해당 flavor 없음)
        """
        await self.get_flavor_by_id(id=id)
        await self.flavorRepository.delete_flavor_by_id(id=id)
        return None
