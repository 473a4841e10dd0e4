import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_payroll"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Cap gross earnings before take-home (some legacy screens did this).
PAYROLL_GROSS_CAP_ENABLED = bool(int(os.getenv("PAYROLL_GROSS_CAP_ENABLED", "0")))
PAYROLL_GROSS_CAP_AMOUNT = float(os.getenv("PAYROLL_GROSS_CAP_AMOUNT", "15000"))
# Derive OT from check-in/check-out when no OT hours were recorded.
PAYROLL_DERIVE_OT_FROM_SHIFT = bool(int(os.getenv("PAYROLL_DERIVE_OT_FROM_SHIFT", "0")))
PAYROLL_STANDARD_SHIFT_HOURS = float(os.getenv("PAYROLL_STANDARD_SHIFT_HOURS", "8"))
