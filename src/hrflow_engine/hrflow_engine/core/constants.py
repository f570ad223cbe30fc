"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Weekday indices follow the 0=Sunday .. 6=Saturday convention used by stored
# working-hours rows ("2,3,4,5,6,0").
SUNDAY = 0
MONDAY = 1
DAYS_OF_WEEK = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

DEFAULT_WEEKLY_OFF_DAY = MONDAY
DEFAULT_START_TIME = "09:30"
DEFAULT_END_TIME = "17:00"
DEFAULT_EARLIEST_CHECK_IN = "08:00"
DEFAULT_LATEST_CHECK_OUT = "20:00"
DEFAULT_WORK_DAYS = (2, 3, 4, 5, 6, 0)
DEFAULT_BREAK_MINUTES = 60
DEFAULT_SHIFT_NAME = "Standard Shift"

DEFAULT_OVERTIME_MULTIPLIER = 1.5

# Payroll policy
PUNCTUALITY_BONUS_HOURS = 0.5
PUNCTUALITY_BONUS_MULTIPLIER = 1.2
ATTENDANCE_BONUS_THRESHOLD_PCT = 95.0
ATTENDANCE_BONUS_RATE = 0.05
LATE_PENALTY_HOURS = 0.5
INCOME_TAX_THRESHOLD = 50000.0
INCOME_TAX_RATE_LOW = 0.10
INCOME_TAX_RATE_HIGH = 0.15
SOCIAL_SECURITY_RATE = 0.062
MEDICARE_RATE = 0.0145
HEALTH_INSURANCE_AMOUNT = 150.0
PROVIDENT_FUND_RATE = 0.12

EARTH_RADIUS_METERS = 6_371_000.0
