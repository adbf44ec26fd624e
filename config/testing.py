import os

ENVIRONMENT = "testing"

CONSOLE_USERNAME = os.getenv("CONSOLE_USERNAME") or "admin"
CONSOLE_PASSWORD = os.getenv("CONSOLE_PASSWORD") or "admin123"

CORS_ORIGINS = "http://localhost:5173"

HOST = "127.0.0.1"
PORT = 3001

CONSOLE_LOG_CAPACITY = 50

DEBUG = False
TESTING = True
