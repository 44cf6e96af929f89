import os

from config.config import *  # noqa: F401,F403
from config.config import logging_config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

LOGGING = logging_config(os.getenv("LOG_LEVEL", "INFO"))
