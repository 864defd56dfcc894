import os
from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


def mysql_uri_from_env() -> str | None:
    """
    Build a MySQL URI from the discrete DB_* variables.
    Returns None when DB_HOST is not set.
    """
    host = os.getenv("DB_HOST")
    if not host:
        return None

    port = os.getenv("DB_PORT")
    url = URL.create(
        "mysql+pymysql",
        username=os.getenv("DB_USER"),
        password=os.getenv("DB_PASS"),
        host=host,
        port=int(port) if port else None,
        database=os.getenv("DB_NAME"),
    )
    return url.render_as_string(hide_password=False)


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_size": 25,
        "max_overflow": 0,
        "pool_recycle": 300,  # seconds
        "pool_pre_ping": True,
    }
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
    SQLALCHEMY_DATABASE_URI = (
        os.getenv("DEV_DATABASE_URI")
        or mysql_uri_from_env()
        or "sqlite:///wiki-dev.db"
    )

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI") or mysql_uri_from_env()

class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}

config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
