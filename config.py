import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _setting(key: str, default=None):
    """Environment variables win over env.yaml, which wins over the default"""
    return os.environ.get(key, data.get(key, default))


class ApplicationConfig:
    # Required, the service refuses to start without it
    MONGO_URI = _setting("MONGO_URI", "")
    MONGODB_DB_NAME = _setting("MONGODB_DB_NAME", "taskdb")
    MONGODB_COLLECTION = _setting("MONGODB_COLLECTION", "tasks")
    DB_CONNECT_TIMEOUT_SECONDS = float(_setting("DB_CONNECT_TIMEOUT_SECONDS", 10))
    API_PORT = int(_setting("API_PORT", 8000))
    API_HOST = _setting("API_HOST", "0.0.0.0")
    SHUTDOWN_GRACE_SECONDS = int(_setting("SHUTDOWN_GRACE_SECONDS", 5))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = _setting("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(int(_setting("ENABLE_LOGGING_MIDDLEWARE", 1)))
