SECRET_KEY = "test-secret"

STORE_CONFIG = {
    "backend": "memory",
    "uri": "mongodb://localhost:27017",
    "database": "engclass_test",
    "timeout_ms": 500,
}

PAYMENT_CONFIG = {
    "bank_id": "MB",
    "account_number": "0987654321",
    "account_name": "NGUYEN VAN A",
    "provider": "https://img.vietqr.io",
}

DEFAULT_STUDENT_FEE = 150000
REJECT_DUPLICATE_SESSIONS = False

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
LOG_FORMAT = "text"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
