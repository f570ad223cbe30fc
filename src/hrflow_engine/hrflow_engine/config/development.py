import os

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# 0=Sunday .. 6=Saturday; Monday off by default
WEEKLY_OFF_DAY = int(os.getenv("WEEKLY_OFF_DAY", "1"))
DEFAULT_OVERTIME_MULTIPLIER = float(os.getenv("DEFAULT_OVERTIME_MULTIPLIER", "1.5"))

# Overrides for PayrollPolicy fields, e.g. {"health_insurance_amount": 150.0}
PAYROLL_POLICY = {
    "health_insurance_amount": float(os.getenv("HEALTH_INSURANCE_AMOUNT", "150")),
}
