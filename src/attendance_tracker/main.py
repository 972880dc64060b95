from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS
from mysql.connector import Error as MySQLError
from werkzeug.exceptions import HTTPException

from .attendance.controller import register as register_attendance
from .common.responses import error_response
from .config.settings import Settings, load_settings
from .container import Container, build_container
from .core.constants import CORS_HEADERS, CORS_METHODS, CORS_ORIGINS
from .core.exceptions import DomainError
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .health.controller import register as register_health

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        if e.status_code >= 500:
            logger.error("%s: %s", type(e).__name__, e)
        return error_response(str(e), e.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return error_response(e.description or e.name, e.code or 500)

    @app.errorhandler(MySQLError)
    def handle_database_error(e: MySQLError):
        logger.exception("Database error")
        return error_response("Database error", 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error")
        return error_response("Internal server error", 500)


def create_app(settings: Optional[Settings] = None, *, container: Optional[Container] = None) -> Flask:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config["DEBUG"] = settings.debug
    app.config["TESTING"] = settings.testing
    app.json.sort_keys = False
    CORS(
        app,
        origins=CORS_ORIGINS,
        methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        expose_headers=["Content-Disposition"],
    )

    db = settings.db
    logger.info("settings: db=%s@%s:%s/%s pool=%s", db.user, db.host, db.port, db.database, db.pool_size)

    if settings.auto_init_db:
        apply_schema(db)
        logger.info("schema ready (tables=%d)", len(list_tables(db)))
    if settings.auto_seed_db:
        apply_seed_sql(db)
        logger.info("demo seed ready")

    container = container or build_container(settings)

    register_error_handlers(app)
    register_health(app, container)
    register_departments(app, container)
    register_employees(app, container)
    register_attendance(app, container)

    return app


def run() -> None:
    settings = load_settings()
    app = create_app(settings)
    logger.info("Server starting on %s:%s", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    run()
