DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

WEEKLY_OFF_DAY = 1
DEFAULT_OVERTIME_MULTIPLIER = 1.5

PAYROLL_POLICY = {}
