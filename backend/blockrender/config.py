import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

SLACK_API_BASE_URL = os.getenv("SLACK_API_BASE_URL", "https://slack.com/api")
SLACK_BOT_TOKEN = os.getenv("SLACK_BOT_TOKEN", "")
SLACK_API_TIMEOUT = float(os.getenv("SLACK_API_TIMEOUT", "30"))

# error | replace
ACTION_COLLISION_POLICY = os.getenv("ACTION_COLLISION_POLICY", "error")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = os.getenv("LOG_JSON", "false").strip().lower() in {"1", "true", "yes", "on"}

# comma separated
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
