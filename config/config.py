import os


def env_pairs(name: str, key: str, value: str, default: list) -> list:
    """Read "HH:MM=N,HH:MM=N" from the environment into [{key: "HH:MM", value: "N"}, ...].

    Values stay text; WageSettings.from_settings converts and validates them.
    An entry without "=" has no value and is rejected there.
    """
    raw = os.getenv(name)
    if not raw:
        return default

    items = []
    for part in raw.split(","):
        clock, sep, number = part.strip().partition("=")
        item = {key: clock.strip()}
        if sep:
            item[value] = number.strip()
        items.append(item)
    return items


def logging_config(level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {"format": "{levelname} {asctime} {name} {message}", "style": "{"},
            "minimal": {"format": "{levelname} {message}", "style": "{"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "verbose" if level == "DEBUG" else "minimal",
                "level": level,
            },
        },
        "loggers": {
            "wage_calculator": {"handlers": ["console"], "level": level, "propagate": False},
            "src.wage_calculator.wage_calculator": {"handlers": ["console"], "level": level, "propagate": False},
            "": {"handlers": ["console"], "level": "WARNING"},
        },
    }


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "wage-calculator-dev"

    # Salary calculation
    TIME_ZONE = os.environ.get("WAGES_TIME_ZONE", "Europe/Helsinki")
    BASE_RATE = os.environ.get("WAGES_BASE_RATE", 375)

    # Evening compensation +$1.15/h from 18:00 to 06:00
    REGULAR_RATES = env_pairs(
        "WAGES_REGULAR_RATES",
        "from",
        "rate",
        [
            {"from": "06:00", "rate": 0},
            {"from": "18:00", "rate": 115},
        ],
    )

    # +25% after 8h, +50% after 11h, +100% after 15h of work in a day
    OVERTIME_LEVELS = env_pairs(
        "WAGES_OVERTIME_LEVELS",
        "after",
        "percent",
        [
            {"after": "08:00", "percent": 25},
            {"after": "11:00", "percent": 50},
            {"after": "15:00", "percent": 100},
        ],
    )

    CSV_FIELDS = {
        "id": os.environ.get("WAGES_CSV_ID", "Person ID"),
        "name": os.environ.get("WAGES_CSV_NAME", "Person Name"),
        "date": os.environ.get("WAGES_CSV_DATE", "Date"),
        "start": os.environ.get("WAGES_CSV_START", "Start"),
        "stop": os.environ.get("WAGES_CSV_STOP", "End"),
    }

    MAX_UPLOAD_BYTES = os.environ.get("MAX_UPLOAD_BYTES", 16 * 1024 * 1024)


# Module-level settings read by the environment modules
SECRET_KEY = Config.SECRET_KEY
TIME_ZONE = Config.TIME_ZONE
BASE_RATE = Config.BASE_RATE
REGULAR_RATES = Config.REGULAR_RATES
OVERTIME_LEVELS = Config.OVERTIME_LEVELS
CSV_FIELDS = Config.CSV_FIELDS
MAX_UPLOAD_BYTES = Config.MAX_UPLOAD_BYTES
