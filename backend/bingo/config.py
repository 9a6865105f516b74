import os


def _origins(raw: str) -> list[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
    DEBUG = False
    TESTING = False

    HOST = os.getenv("BINGO_HOST", "0.0.0.0")
    PORT = int(os.getenv("BINGO_PORT", "3001"))
    # the React client runs on :3000 in development
    CORS_ORIGINS = _origins(os.getenv("BINGO_CORS_ORIGINS", "http://localhost:3000"))
    LOG_LEVEL = os.getenv("BINGO_LOG_LEVEL", "INFO")
    SOCKETIO_ASYNC_MODE = os.getenv("BINGO_ASYNC_MODE", "eventlet")

    # optional YAML/JSON file with upper-case overrides of the keys above
    SETTINGS_FILE = os.getenv("BINGO_SETTINGS")


class DevConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("BINGO_LOG_LEVEL", "DEBUG")


class TestConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test-secret"
    SOCKETIO_ASYNC_MODE = "threading"
    SETTINGS_FILE = None
