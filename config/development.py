import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

STORE_CONFIG = {
    # "mongo" hoặc "memory" (không cần MongoDB khi chạy thử)
    "backend": os.getenv("STORE_BACKEND", "mongo"),
    "uri": os.getenv("MONGO_URI", "mongodb://localhost:27017"),
    "database": os.getenv("MONGO_DB_NAME", "engclass"),
    "timeout_ms": int(os.getenv("MONGO_TIMEOUT_MS", "5000")),
}

PAYMENT_CONFIG = {
    "bank_id": os.getenv("PAYMENT_BANK_ID", "MB"),
    "account_number": os.getenv("PAYMENT_ACCOUNT_NUMBER", "0987654321"),
    "account_name": os.getenv("PAYMENT_ACCOUNT_NAME", "NGUYEN VAN A"),
    "provider": os.getenv("PAYMENT_QR_PROVIDER", "https://img.vietqr.io"),
}

DEFAULT_STUDENT_FEE = int(os.getenv("DEFAULT_STUDENT_FEE", "150000"))
REJECT_DUPLICATE_SESSIONS = bool(int(os.getenv("REJECT_DUPLICATE_SESSIONS", "0")))

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")

# Creates indexes on startup (MongoDB only, idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo classes/students into an empty store
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
