import os

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

WEEKLY_OFF_DAY = int(os.getenv("WEEKLY_OFF_DAY", "1"))
DEFAULT_OVERTIME_MULTIPLIER = float(os.getenv("DEFAULT_OVERTIME_MULTIPLIER", "1.5"))

PAYROLL_POLICY = {
    "health_insurance_amount": float(os.getenv("HEALTH_INSURANCE_AMOUNT", "150")),
    "income_tax_threshold": float(os.getenv("INCOME_TAX_THRESHOLD", "50000")),
}
