#config/settings

import os
from dotenv import load_dotenv

# Load variables from the .env file
load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./aryalog.db")

DEBUG_MODE = os.getenv("DEBUG_MODE", "false").lower() in ("1", "true", "yes")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

# Cloud share server
SHARE_SERVER_URL = os.getenv("SHARE_SERVER_URL", "")
SHARE_API_KEY = os.getenv("SHARE_API_KEY", "")
SHARE_TIMEOUT_SECONDS = float(os.getenv("SHARE_TIMEOUT_SECONDS", "10"))

# Share tokens are signed with an app-wide secret so any install can verify them
SHARE_SECRET = os.getenv("SHARE_SECRET", "aryalog-dev-secret")
SHARE_ALGORITHM = os.getenv("SHARE_ALGORITHM", "HS256")
SHARE_TOKEN_DAYS = int(os.getenv("SHARE_TOKEN_DAYS", "30"))

APP_NAME = "AryaLog"
APP_VERSION = "1.0.0"
SHARE_TITLE = "AryaLog Baby Care"
