import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

API_BASE = os.getenv("INFRACANVAS_API_BASE", "http://localhost:8000")
DEFAULT_PROJECT = os.getenv("INFRACANVAS_PROJECT", "canvas-project")
DEFAULT_ENV = os.getenv("INFRACANVAS_ENV", "dev")

REQUEST_TIMEOUT = float(os.getenv("INFRACANVAS_REQUEST_TIMEOUT", "300"))
AUTOSAVE_DEBOUNCE_SECONDS = float(os.getenv("INFRACANVAS_AUTOSAVE_DEBOUNCE", "2.0"))

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./infracanvas.db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "console")  # console | json

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
