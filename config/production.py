import os

ENVIRONMENT = "production"

CONSOLE_USERNAME = os.getenv("CONSOLE_USERNAME") or "admin"
CONSOLE_PASSWORD = os.getenv("CONSOLE_PASSWORD") or "admin123"

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "https://hiki-vision-frontend.vercel.app")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))

CONSOLE_LOG_CAPACITY = int(os.getenv("CONSOLE_LOG_CAPACITY", "500"))

DEBUG = False
