import os

from .config import API_BASE_URL, IMAGE_BASE_URL, REQUEST_TIMEOUT, SESSION_DAYS

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
LOG_DIR = os.getenv("LOG_DIR", "logs")
