SECRET_KEY = "test-secret"

API_BASE_URL = "http://backend.test/api"
IMAGE_BASE_URL = "http://backend.test"
REQUEST_TIMEOUT = 1.0

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
# No log files during tests
LOG_DIR = None

SESSION_DAYS = 1
