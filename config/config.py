import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "meal-admin-secret"

    # Remote meal-management backend
    API_BASE_URL = os.environ.get("API_BASE_URL", "http://10.10.10.176:8080/api").rstrip("/")
    IMAGE_BASE_URL = os.environ.get("IMAGE_BASE_URL", API_BASE_URL[: -len("/api")] if API_BASE_URL.endswith("/api") else API_BASE_URL)
    REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "10"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    LOG_DIR = os.environ.get("LOG_DIR", "logs")

    SESSION_DAYS = int(os.environ.get("SESSION_DAYS", "7"))


# Module-level names read by create_app()
SECRET_KEY = Config.SECRET_KEY
API_BASE_URL = Config.API_BASE_URL
IMAGE_BASE_URL = Config.IMAGE_BASE_URL
REQUEST_TIMEOUT = Config.REQUEST_TIMEOUT
LOG_LEVEL = Config.LOG_LEVEL
LOG_DIR = Config.LOG_DIR
SESSION_DAYS = Config.SESSION_DAYS
