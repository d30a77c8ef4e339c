"""Runtime configuration, read from the environment and an optional .env file."""

import os
from pathlib import Path

from dotenv import load_dotenv

# --- Base Directory ---
# src/shoestore/infrastructure/settings.py -> project root
BASE_DIR = Path(__file__).resolve().parents[3]

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Storage ---
DATA_DIR = Path(os.getenv("SHOESTORE_DATA_DIR", str(BASE_DIR / "data")))

# --- Logging ---
LOG_DIR = Path(os.getenv("SHOESTORE_LOG_DIR", str(BASE_DIR / "logs")))
ENVIRONMENT = os.getenv("ENVIRONMENT", "development").lower()
LOG_LEVEL = os.getenv("LOG_LEVEL")
