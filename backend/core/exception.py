from typing import Optional


class StoreException(Exception):
    """
    query executor(DB) 호출 중 발생한 모든 오류
    - 연결 실패, 제약조건 위반, 잘못된 쿼리 등을 구분하지 않는다
    - 사용자에게는 상세 내용을 노출하지 않음 (500 Server error)
    """

    def __init__(self, origin: Exception, sql: Optional[str] = None):
        self.origin = origin
        self.sql = sql

    def __str__(self) -> str:
        return f'{self.origin.__class__.__name__}: {self.origin}'


class ApiServerException(Exception):
    def __init__(
            self,
            status: int,
            error_type: Optional[str] = 'error',
            message: Optional[str] = '',
            detail: Optional[str] = '',
    ) -> None:
        self.error_type = error_type
        self.status = status
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        return f'{self.detail}'
