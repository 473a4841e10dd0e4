import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_payroll_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

PAYROLL_GROSS_CAP_ENABLED = False
PAYROLL_GROSS_CAP_AMOUNT = 15000
PAYROLL_DERIVE_OT_FROM_SHIFT = False
PAYROLL_STANDARD_SHIFT_HOURS = 8
