from fastapi import Request

from backend.core.db import Database


def get_db(request: Request) -> Database:
    """
    app 생성시 주입된 Database를 반환
    - 테스트에서는 dependency_overrides로 대체 store를 넣을 수 있다
    """
    return request.app.state.db
