"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LEAVES_PER_YEAR = 30
REQUEST_ID_BASE = 1000
FIRST_USER_ID = 101
DAYS_IN_YEAR = 365

HIGH_STRESS_LEAVES = 20
LOW_STRESS_LEAVES = 5

EXPORT_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
