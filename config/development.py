import os

from config.config import *  # noqa: F401,F403
from config.config import logging_config

DEBUG = True

LOGGING = logging_config(os.getenv("LOG_LEVEL", "DEBUG"))
