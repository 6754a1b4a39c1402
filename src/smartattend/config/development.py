import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")
STORAGE_NAMESPACE = os.getenv("STORAGE_NAMESPACE", "smartattend")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "smartattend_db"),
}

# External narrative service; empty URL disables the call
INSIGHT_API_URL = os.getenv("INSIGHT_API_URL", "")
INSIGHT_API_KEY = os.getenv("INSIGHT_API_KEY", "")
INSIGHT_TIMEOUT_SECONDS = float(os.getenv("INSIGHT_TIMEOUT_SECONDS", "20"))

AT_RISK_THRESHOLD = float(os.getenv("AT_RISK_THRESHOLD", "75"))

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo batches on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
