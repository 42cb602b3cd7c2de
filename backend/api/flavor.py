from typing import List, Optional
from fastapi import APIRouter, Depends, status

from backend.schema.flavor import FlavorRequest, FlavorResponse
from backend.service.flavor import FlavorService

router = APIRouter(prefix="/flavors", tags=["flavor"])


@router.get("", response_model=List[FlavorResponse], status_code=status.HTTP_200_OK)
async def get_flavors(service: FlavorService = Depends()):
    """
    [API] - Get Flavor List
    :return: 200 - List[FlavorResponse]
    :raises 500: DB 오류
    """
    return await service.get_flavors()


@router.get("/{id}", response_model=FlavorResponse, status_code=status.HTTP_200_OK)
async def get_flavor_by_id(id: str, service: FlavorService = Depends()):
    """
    [API] - Get Flavor
    :param id: id
    :return: 200 - FlavorResponse
    :raises 404: 해당하는 flavor 없는 경우
    :raises 500: DB 오류
    """
    return await service.get_flavor_by_id(id=id)


@router.post("", response_model=FlavorResponse, status_code=status.HTTP_201_CREATED)
async def create_flavor(flavorRequest: Optional[FlavorRequest] = None, service: FlavorService = Depends()):
    """
    [API] - Create Flavor
    :param flavorRequest: 사용자 입력 (name, is_favorite), body가 없으면 None
    :return: 201 - FlavorResponse
    :raises 500: DB 오류 (name 누락 등 제약조건 위반 포함)
    """
    return await service.create_flavor(flavorRequest=flavorRequest)


@router.put("/{id}", response_model=Optional[FlavorResponse], status_code=status.HTTP_200_OK)
async def update_flavor_by_id(id: str, flavorRequest: Optional[FlavorRequest] = None,
                              service: FlavorService = Depends()):
    """
    [API] - Update Flavor (name, is_favorite)
    :param id: id
    :param flavorRequest: 사용자 입력 (name, is_favorite), body가 없으면 None
    :return: 200 - FlavorResponse
    :raises 404: 해당 flavor 찾을 수 없음
    :raises 500: DB 오류
    """
    return await service.update_flavor_by_id(id=id, flavorRequest=flavorRequest)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_flavor_by_id(id: str, service: FlavorService = Depends()):
    """
    [API] - Delete Flavor
    :param id: id
    :return: 204 - No Content
    :raises 404: 해당 flavor 없는 경우
    :raises 500: DB 오류
    """
    return await service.delete_flavor_by_id(id=id)
