"""Startup configuration.

The environment-specific modules (development/testing/production) only read
environment variables. This module turns the selected one into a single
immutable ``Settings`` object that is validated once and then passed to
``create_app`` explicitly.
"""
from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv

from ..core.constants import DEFAULT_DB_POOL_SIZE, DEFAULT_DB_POOL_TIMEOUT, DEFAULT_EXPORT_DIR, MAX_DB_POOL_SIZE
from ..core.exceptions import ConfigurationError
from ..database.connection import DBConfig
from . import get_settings_module


@dataclass(frozen=True)
class Settings:
    db: DBConfig
    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False
    testing: bool = False
    log_level: str = "INFO"
    export_dir: str = DEFAULT_EXPORT_DIR
    auto_init_db: bool = False
    auto_seed_db: bool = False

    def validate(self) -> "Settings":
        if not self.db.host:
            raise ConfigurationError("DB_HOST must not be empty")
        if not self.db.user:
            raise ConfigurationError("DB_USER must not be empty")
        if not self.db.database:
            raise ConfigurationError("DB_NAME must not be empty")
        if not 0 < self.db.port < 65536:
            raise ConfigurationError(f"DB_PORT out of range: {self.db.port}")
        if not 1 <= self.db.pool_size <= MAX_DB_POOL_SIZE:
            raise ConfigurationError(f"DB_POOL_SIZE must be between 1 and {MAX_DB_POOL_SIZE}")
        if self.db.pool_timeout <= 0:
            raise ConfigurationError("DB_POOL_TIMEOUT must be positive")
        if not 0 < self.port < 65536:
            raise ConfigurationError(f"PORT out of range: {self.port}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Unknown LOG_LEVEL: {self.log_level}")
        if not self.export_dir:
            raise ConfigurationError("EXPORT_DIR must not be empty")
        return self

    @classmethod
    def from_module(cls, settings: ModuleType) -> "Settings":
        db_config = dict(getattr(settings, "DB_CONFIG"))
        try:
            db = DBConfig(
                host=str(db_config["host"]),
                port=int(db_config.get("port", 3306)),
                user=str(db_config["user"]),
                password=str(db_config.get("password", "")),
                database=str(db_config["database"]),
                pool_size=int(db_config.get("pool_size", DEFAULT_DB_POOL_SIZE)),
                pool_timeout=float(db_config.get("pool_timeout", DEFAULT_DB_POOL_TIMEOUT)),
            )
        except KeyError as e:
            raise ConfigurationError(f"DB_CONFIG is missing {e.args[0]!r}")

        return cls(
            db=db,
            host=str(getattr(settings, "HOST", "127.0.0.1")),
            port=int(getattr(settings, "PORT", 8080)),
            debug=bool(getattr(settings, "DEBUG", False)),
            testing=bool(getattr(settings, "TESTING", False)),
            log_level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
            export_dir=str(getattr(settings, "EXPORT_DIR", DEFAULT_EXPORT_DIR)),
            auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
            auto_seed_db=bool(getattr(settings, "AUTO_SEED_DB", False)),
        )


def load_settings(settings_module: Optional[str] = None) -> Settings:
    load_dotenv(override=False)
    module_name = settings_module or get_settings_module()
    try:
        module = importlib.import_module(module_name)
    except ValueError as e:
        # int() on a malformed DB_PORT / PORT / DB_POOL_SIZE
        raise ConfigurationError(f"Invalid setting in {module_name}: {e}")
    return Settings.from_module(module).validate()
