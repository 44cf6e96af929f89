from config.config import logging_config

SECRET_KEY = "test-secret"

# Fixed values so tests do not depend on the environment
TIME_ZONE = "Europe/Helsinki"
BASE_RATE = 375
REGULAR_RATES = [
    {"from": "06:00", "rate": 0},
    {"from": "18:00", "rate": 115},
]
OVERTIME_LEVELS = [
    {"after": "08:00", "percent": 25},
    {"after": "11:00", "percent": 50},
    {"after": "15:00", "percent": 100},
]
CSV_FIELDS = {
    "id": "Person ID",
    "name": "Person Name",
    "date": "Date",
    "start": "Start",
    "stop": "End",
}
MAX_UPLOAD_BYTES = 1024 * 1024

DEBUG = False
TESTING = True

LOGGING = logging_config("WARNING")
