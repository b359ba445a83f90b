import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "shop_payroll"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# "full" pays HRA whatever the attendance; "pro_rated" scales it below 25 days.
HRA_POLICY = os.getenv("HRA_POLICY", "full")

PART_TIME_RATES = {
    "rate_per_day": int(os.getenv("PT_RATE_PER_DAY", "800")),
    "rate_per_shift": int(os.getenv("PT_RATE_PER_SHIFT", "400")),
}
