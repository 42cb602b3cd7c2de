from datetime import datetime
from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from sqlalchemy.sql import expression

from backend.core.db import Base


class Flavor(Base):
    """
    flavors 테이블 선언 (create_all 용)
    - 조회/수정은 repository의 raw sql로만 수행한다
    """
    __tablename__ = 'flavors'
    id: int = Column(Integer, primary_key=True, autoincrement=True, comment='flavor id')
    name: str = Column(String(255), nullable=False, comment='flavor name')
    is_favorite: bool = Column(Boolean, server_default=expression.false(), comment='즐겨찾기 여부')
    created_at: datetime = Column(DateTime, server_default=func.now(), comment='생성시간')
    updated_at: datetime = Column(DateTime, server_default=func.now(), comment='수정시간')
