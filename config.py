"""Global configuration for Selectorsmith."""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Paths
BASE_DIR = Path(__file__).parent
LOGS_DIR = Path(os.getenv("LOGS_DIR", BASE_DIR / "logs"))

# Ensure directories exist
LOGS_DIR.mkdir(parents=True, exist_ok=True)

# Flask
FLASK_HOST = os.getenv("FLASK_HOST", "127.0.0.1")
FLASK_PORT = int(os.getenv("FLASK_PORT", "5160"))
FLASK_DEBUG = os.getenv("FLASK_DEBUG", "false").lower() == "true"
SECRET_KEY = os.getenv("SECRET_KEY", "selectorsmith-dev-key-change-in-prod")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if FLASK_DEBUG else "INFO").upper()

# Selector combinators, in the order they are documented
COMBINATORS = [" ", "+", "~", ">"]
