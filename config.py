"""Runtime settings, read from the environment (and a local .env file)."""
import os

from dotenv import load_dotenv

load_dotenv()

APP_NAME = "NeuroHire Resume Matcher"
APP_VERSION = "1.0.0"

# Server
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "5000"))
CORS_ORIGINS: list[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Request validation
MIN_TEXT_LENGTH: int = int(os.getenv("MIN_TEXT_LENGTH", "50"))
MAX_UPLOAD_MB: int = int(os.getenv("MAX_UPLOAD_MB", "10"))
MAX_UPLOAD_BYTES: int = MAX_UPLOAD_MB * 1024 * 1024
ALLOWED_EXTENSIONS: tuple[str, ...] = (".pdf", ".doc", ".docx", ".txt")

# Dashboard
API_URL: str = os.getenv("API_URL", "http://localhost:5000/api")
LAST_RESULT_PATH: str = os.getenv("LAST_RESULT_PATH", os.path.join("data", "last_analysis.json"))
