from backend.main import load_log_config


def test_load_log_config():
    """
    log_conf.yaml은 uvicorn에 넘길 수 있는 dictConfig
    """
    config = load_log_config()
    assert config['version'] == 1
    assert {'uvicorn', 'uvicorn.access', 'backend'} <= set(config['loggers'])
    assert config['loggers']['backend']['handlers'] == ['default']
