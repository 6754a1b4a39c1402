SECRET_KEY = "test-secret"

STORE_BACKEND = "memory"
STORAGE_NAMESPACE = "smartattend_test"

DB_CONFIG: dict = {}

INSIGHT_API_URL = ""
INSIGHT_API_KEY = ""
INSIGHT_TIMEOUT_SECONDS = 5.0

AT_RISK_THRESHOLD = 75.0

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
