import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_system_test"),
    "pool_size": int(os.getenv("DB_POOL_SIZE", "2")),
    "pool_timeout": float(os.getenv("DB_POOL_TIMEOUT", "5")),
}

HOST = "127.0.0.1"
PORT = 8080

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
