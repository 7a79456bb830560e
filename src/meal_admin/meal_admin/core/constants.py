"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_REQUEST_TIMEOUT = 10.0
FIRST_CALENDAR_YEAR = 2024

# Session keys
SESSION_TOKEN_KEY = "token"
SESSION_USER_KEY = "user"
SESSION_THEME_KEY = "theme"

ALL_DEPARTMENTS = "All Departments"

DEPARTMENTS = [
    ALL_DEPARTMENTS,
    "Software Engineering",
    "Human Resources",
    "Finance",
    "Marketing",
    "Operations",
    "Management",
    "R&D",
    "Quality Assurance",
    "Customer Support",
    "Sales",
]

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

WEEKDAY_HEADERS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
