"""Application factory, configuration and the command that serves the API."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass, field

from flask import Blueprint, Flask
from sqlalchemy.engine import URL

from customerapi.container import Container, build_container
from customerapi.errorhandler import handle_error
from customerapi.handlers import register
from customerapi.repository import close, connect

_log = logging.getLogger(__name__)


@dataclass
class AppConfig:
    """Settings of the HTTP server."""

    name: str = ""
    env: str = ""
    host: str = "localhost"
    port: str = "8080"
    timeout_sec: int = 10


@dataclass
class DBConfig:
    """Settings of the database connection."""

    host: str = "localhost"
    port: str = "5432"
    db_name: str = ""
    user: str = ""
    password: str = ""
    ssl_mode: str = "disable"

    def url(self) -> URL:
        """Return the PostgreSQL connection URL."""
        return URL.create(
            "postgresql",
            username=self.user or None,
            password=self.password or None,
            host=self.host or None,
            port=int(self.port) if self.port else None,
            database=self.db_name or None,
            query={"sslmode": self.ssl_mode} if self.ssl_mode else {},
        )


@dataclass
class Config:
    """Whole application configuration."""

    app: AppConfig = field(default_factory=AppConfig)
    db: DBConfig = field(default_factory=DBConfig)


def create_app(container: Container) -> Flask:
    """Build the Flask application serving the API under ``/api``."""
    app = Flask(__name__)
    app.register_error_handler(Exception, handle_error)
    api = Blueprint("api", __name__, url_prefix="/api")
    register(api, container.create_customer_handler, container.list_customers_handler)
    app.register_blueprint(api)
    return app


def _parse(argv: list[str] | None) -> tuple[Config, str | None]:
    env = os.environ
    defaults = Config()
    parser = argparse.ArgumentParser(prog="customerapi", description="Serve the customer API.")
    parser.add_argument("--host", default=env.get("APP_HOST", defaults.app.host))
    parser.add_argument("--port", default=env.get("APP_PORT", defaults.app.port))
    parser.add_argument(
        "--timeout", type=int, default=int(env.get("APP_TIMEOUT_SEC", defaults.app.timeout_sec))
    )
    parser.add_argument("--db-host", default=env.get("DB_HOST", defaults.db.host))
    parser.add_argument("--db-port", default=env.get("DB_PORT", defaults.db.port))
    parser.add_argument("--db-name", default=env.get("DB_NAME", defaults.db.db_name))
    parser.add_argument("--db-user", default=env.get("DB_USER", defaults.db.user))
    parser.add_argument("--db-sslmode", default=env.get("DB_SSLMODE", defaults.db.ssl_mode))
    parser.add_argument(
        "--database-url",
        default=env.get("DATABASE_URL"),
        help="full SQLAlchemy URL; overrides the --db-* options",
    )
    args = parser.parse_args(argv)
    config = Config(
        app=AppConfig(
            name=env.get("APP_NAME", defaults.app.name),
            env=env.get("APP_ENV", defaults.app.env),
            host=args.host,
            port=args.port,
            timeout_sec=args.timeout,
        ),
        db=DBConfig(
            host=args.db_host,
            port=args.db_port,
            db_name=args.db_name,
            user=args.db_user,
            password=env.get("DB_PASSWORD", defaults.db.password),
            ssl_mode=args.db_sslmode,
        ),
    )
    return config, args.database_url


def main(argv: list[str] | None = None) -> int:
    """Serve the API until interrupted."""
    logging.basicConfig(level=logging.INFO)
    config, database_url = _parse(argv)
    engine = connect(database_url or config.db.url())
    try:
        app = create_app(build_container(engine))
        _log.info("api listening: %s:%s", config.app.host, config.app.port)
        app.run(host=config.app.host, port=int(config.app.port))
        _log.info("server closing")
    finally:
        close(engine)
    _log.info("server closed successfully")
    return 0