import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORE_CONFIG = {
    "backend": os.getenv("STORE_BACKEND", "mongo"),
    "uri": os.getenv("MONGO_URI", "mongodb://localhost:27017"),
    "database": os.getenv("MONGO_DB_NAME", "engclass"),
    "timeout_ms": int(os.getenv("MONGO_TIMEOUT_MS", "5000")),
}

PAYMENT_CONFIG = {
    "bank_id": os.getenv("PAYMENT_BANK_ID", "MB"),
    "account_number": os.getenv("PAYMENT_ACCOUNT_NUMBER", ""),
    "account_name": os.getenv("PAYMENT_ACCOUNT_NAME", ""),
    "provider": os.getenv("PAYMENT_QR_PROVIDER", "https://img.vietqr.io"),
}

DEFAULT_STUDENT_FEE = int(os.getenv("DEFAULT_STUDENT_FEE", "150000"))
REJECT_DUPLICATE_SESSIONS = bool(int(os.getenv("REJECT_DUPLICATE_SESSIONS", "0")))

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
