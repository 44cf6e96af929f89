"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

DEFAULT_TIME_ZONE = "Europe/Helsinki"
DEFAULT_ENCODING = "utf-8"

DEFAULT_CSV_FIELDS = {
    "id": "Person ID",
    "name": "Person Name",
    "date": "Date",
    "start": "Start",
    "stop": "End",
}
