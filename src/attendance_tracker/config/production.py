import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_system"),
    "pool_size": int(os.getenv("DB_POOL_SIZE", "25")),
    "pool_timeout": float(os.getenv("DB_POOL_TIMEOUT", "30")),
}

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

DEBUG = bool(int(os.getenv("DEBUG", "0")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
