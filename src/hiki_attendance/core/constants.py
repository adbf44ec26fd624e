"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

CONSOLE_REALM = "Hiki Vision Console"

DEFAULT_CONSOLE_USERNAME = "admin"
DEFAULT_CONSOLE_PASSWORD = "admin123"

DEFAULT_CORS_ORIGINS = "https://hiki-vision-frontend.vercel.app"
CORS_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3001

DEFAULT_CONSOLE_LOG_CAPACITY = 500
DEFAULT_CONSOLE_LOG_LIMIT = 100
