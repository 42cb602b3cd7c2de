from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class FlavorRequest(BaseModel):
    """
    flavor 생성/수정 request body
    - 필드 타입/존재 여부를 검증하지 않고 그대로 DB에 전달한다
    - body에 없는 필드는 None (DB 제약조건에 따라 거절될 수 있음)
    """
    name: Optional[Any] = Field(default=None)
    is_favorite: Optional[Any] = Field(default=None)

    def to_params(self) -> Dict[str, Any]:
        """
        user input -> sql bind parameter
        """
        return {
            'name': self.name,
            'is_favorite': self.is_favorite,
        }


class FlavorResponse(BaseModel):
    """
    flavors 테이블의 row (SELECT * 결과이므로 그 외 컬럼도 그대로 포함)
    """
    model_config = ConfigDict(extra='allow')

    id: int
    name: Optional[str] = Field(default=None)
    is_favorite: Optional[bool] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None)
