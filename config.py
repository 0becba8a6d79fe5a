"""Application configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Paths
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "data"
DB_PATH = DATA_DIR / "review.db"

# Ensure directories exist
DATA_DIR.mkdir(exist_ok=True)


def _int_env(name: str, default: int) -> int:
    """Read an integer from the environment, falling back to *default*."""
    raw = os.getenv(name, "")
    try:
        return int(raw)
    except ValueError:
        return default


# Database (any SQLAlchemy URL; PostgreSQL in production, SQLite locally)
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DB_PATH}")

# Object store serving product images (MinIO bucket endpoint)
IMAGE_BASE_URL = os.getenv("IMAGE_BASE_URL", "http://127.0.0.1:9000").rstrip("/")

# Catalog paging
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 500

# App settings
APP_TITLE = "FashionX - Product Review System"
APP_PORT = _int_env("APP_PORT", 3001)
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# The review UI reaches the catalog API over HTTP; by default the same process
API_BASE_URL = os.getenv("API_BASE_URL", f"http://localhost:{APP_PORT}/api").rstrip("/")
API_TIMEOUT = _int_env("API_TIMEOUT", 15)
