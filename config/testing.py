import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "engine": os.getenv("DB_ENGINE", "sqlite"),
    "path": os.getenv("SQLITE_PATH", "./test_employees.db"),
    "timeout": float(os.getenv("SQLITE_TIMEOUT", "5")),
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "employee_store_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
