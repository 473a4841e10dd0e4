"""Statutory rates, caps and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

BASIC_SHARE = 0.60

PF_RATE = 0.12
PF_CAP = 1800
EPF_EMPLOYER_RATE = 0.0833
EPS_EMPLOYER_RATE = 0.0367

ESI_RATE = 0.0075
ESI_EMPLOYER_RATE = 0.0325
ESI_THRESHOLD = 21000

# OT is excluded from the ESI base for these branches.
SPECIAL_ESI_BRANCHES = frozenset({"UP-TN", "UP-BAG"})

DEFAULT_OT_RATE = 60
DEFAULT_DRIVER_RATE = 60

# Last-resort denominator when only a monthly basic salary is configured.
FALLBACK_DAYS_PER_MONTH = 30

DEFAULT_GROSS_CAP = 15000
DEFAULT_SHIFT_HOURS = 8
