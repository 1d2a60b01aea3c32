import os
from pathlib import Path
from dotenv import load_dotenv

# .env next to the package root (license_finder/.env), then the working directory
env_path = Path(__file__).resolve().parent.parent / '.env'
load_dotenv(dotenv_path=env_path)
load_dotenv()

# logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

# number of leading bytes inspected to tell text files from binaries
TEXT_SAMPLE_SIZE = int(os.getenv("TEXT_SAMPLE_SIZE", "512"))

# when set, the HTTP API refuses to scan directories outside of it
SCAN_BASE_DIR = os.getenv("SCAN_BASE_DIR") or None
