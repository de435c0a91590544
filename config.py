import os
from dotenv import load_dotenv

load_dotenv()

TESTING = os.getenv("TESTING") == "1"
DATABASE_URL = os.getenv("DATABASE_URL")

# Default call window (process-local wall clock)
CALL_WINDOW_START_HOUR = int(os.getenv("CALL_WINDOW_START_HOUR", "9"))
CALL_WINDOW_END_HOUR = int(os.getenv("CALL_WINDOW_END_HOUR", "21"))
MAX_CALL_PROPOSALS = int(os.getenv("MAX_CALL_PROPOSALS", "5"))
MAX_CALL_DURATION_MINUTES = int(os.getenv("MAX_CALL_DURATION_MINUTES", str(24 * 60)))

TIME_API_URL = os.getenv("TIME_API_URL", "https://timeapi.io/api/Conversion/ConvertTimeZone")
TIME_API_TIMEOUT = float(os.getenv("TIME_API_TIMEOUT", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

SUPPORTED_TIMEZONES = [
    "America/New_York", "America/Chicago", "America/Los_Angeles", "Europe/London", "Europe/Paris",
    "Asia/Dubai", "Asia/Tokyo", "Asia/Kolkata", "Australia/Sydney", "UTC"
]
