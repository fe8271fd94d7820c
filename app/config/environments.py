import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_ACCESS_TOKEN_EXPIRY = 60 * 60 * 24  # 1 Day
DEFAULT_REFRESH_TOKEN_EXPIRY = 60 * 60 * 24 * 10  # 10 Days
DEFAULT_PORT = 8000
DEFAULT_ENVIRONMENT = "development"
DEFAULT_MEDIA_BUCKET = "media"
DEFAULT_LOG_LEVEL = "INFO"

JWT_ALGORITHM = "HS256"

ACCESS_TOKEN_SECRET = os.getenv("ACCESS_TOKEN_SECRET")
REFRESH_TOKEN_SECRET = os.getenv("REFRESH_TOKEN_SECRET")
if not all([ACCESS_TOKEN_SECRET, REFRESH_TOKEN_SECRET]):
    raise RuntimeError("Token secret environment variable is missing! Set it in your .env file.")

ACCESS_TOKEN_EXPIRY = int(os.getenv("ACCESS_TOKEN_EXPIRY", DEFAULT_ACCESS_TOKEN_EXPIRY))
REFRESH_TOKEN_EXPIRY = int(os.getenv("REFRESH_TOKEN_EXPIRY", DEFAULT_REFRESH_TOKEN_EXPIRY))
PORT = int(os.getenv("PORT", DEFAULT_PORT))
ENVIRONMENT = os.getenv("ENVIRONMENT", DEFAULT_ENVIRONMENT)
LOG_LEVEL = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")]

DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL environment variable is missing! Set it in your .env file.")

# Media host credentials are only needed once a file is actually uploaded
SUPABASE_PROJECT_URL = os.getenv("SUPABASE_PROJECT_URL")
SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY")
MEDIA_BUCKET = os.getenv("MEDIA_BUCKET", DEFAULT_MEDIA_BUCKET)
