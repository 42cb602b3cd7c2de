"""
flavor api 실행 진입점
- uvicorn backend.main:app 으로 실행하거나
- python -m backend.main / flavor-api 로 직접 실행 (PORT 환경변수, 기본 3000)
"""
from pathlib import Path
import yaml

from backend.core.config import get_setting
from backend.app import create_app_with_db

SETTINGS = get_setting()
LOG_CONFIG_PATH = Path(__file__).parent / 'log_conf.yaml'

app = create_app_with_db(SETTINGS.DB_URL)


def load_log_config(path: Path = LOG_CONFIG_PATH) -> dict:
    """
    uvicorn에 넘길 logging dictConfig를 yaml에서 읽어온다
    """
    with path.open('rt') as f:
        return yaml.safe_load(f)


def run():
    import uvicorn

    uvicorn.run("backend.main:app", host=SETTINGS.SERVER_HOST, port=SETTINGS.PORT,
                log_config=load_log_config(), reload=SETTINGS.SERVER_RELOAD)


if __name__ == "__main__":
    run()
