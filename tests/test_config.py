# tests/test_config.py
from kanban.core.config import Settings


def test_database_url_built_from_parts():
    settings = Settings(
        DB_HOST="db.internal",
        DB_PORT=3307,
        DB_USER="kanban",
        DB_PASSWORD="s3cret",
        DB_NAME="boards",
        _env_file=None,
    )
    url = settings.database_url
    assert url.drivername == "mysql+pymysql"
    assert (url.host, url.port, url.username, url.password, url.database) == (
        "db.internal",
        3307,
        "kanban",
        "s3cret",
        "boards",
    )


def test_database_url_without_password():
    url = Settings(DB_PASSWORD="", _env_file=None).database_url
    assert url.password is None
    assert url.database == "kanban_db"


def test_database_url_override_wins():
    settings = Settings(DATABASE_URL="sqlite:///./kanban.db", DB_HOST="ignored", _env_file=None)
    assert settings.database_url == "sqlite:///./kanban.db"


def test_cors_origins_default_allows_all():
    assert Settings(_env_file=None).cors_origins == ["*"]


def test_cors_origins_parses_comma_separated_list():
    settings = Settings(CORS_ORIGINS=" http://a.test, ,http://b.test ", _env_file=None)
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
