import os
from pathlib import Path

from health_companion.core.env import load_env

load_env()

BASE_DIR = Path(__file__).resolve().parents[2]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# 10 MB
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

# "sqlite" (default) or "memory"
CHECKPOINT_BACKEND = os.getenv("CHECKPOINT_BACKEND", "sqlite").lower().strip()
ASSESSMENT_DB_PATH = Path(
    os.getenv("ASSESSMENT_DB_PATH", str(BASE_DIR / "health_companion" / "db" / "assessments.db"))
)

ALTERNATIVES_LIMIT = int(os.getenv("ALTERNATIVES_LIMIT", "3"))
