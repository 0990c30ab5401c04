import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

BLOB_BACKEND = os.getenv("BLOB_BACKEND", "mysql")
DATA_DIR = os.getenv("DATA_DIR", "/var/lib/school-roster")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "school_roster"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
