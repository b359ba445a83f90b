"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Working-day baseline for full-time pay, independent of calendar days.
STANDARD_WORKING_DAYS = 26
NEAR_FULL_MONTH_DAYS = 25

SUNDAY_ABSENCE_PENALTY = 500

DEFAULT_PART_TIME_RATE_PER_DAY = 800
DEFAULT_PART_TIME_RATE_PER_SHIFT = 400

PART_TIME_ID_PREFIX = "pt_"

AUTO_CARRY_NOTE = "Auto-carried from previous month"
RESTORED_ADVANCE_NOTE = "Restored from old record - {name}"
