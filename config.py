"""
Configuration settings for the JSON to TOON converter.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Pick up overrides from a local .env file, without clobbering the environment
load_dotenv()

VERSION = "1.0.0"

# Base directory
BASE_DIR = Path(__file__).parent

# Output directory for converted files
DATA_DIR = Path(os.getenv("TOON_DATA_DIR", BASE_DIR / "data"))

# Official extension for TOON documents
OUTPUT_EXTENSION = ".toon"
DEFAULT_OUTPUT_FILE = DATA_DIR / f"data{OUTPUT_EXTENSION}"

# Encoder limits
MAX_DEPTH = int(os.getenv("TOON_MAX_DEPTH", "100"))

# Logging
LOG_LEVEL = os.getenv("TOON_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("TOON_LOG_FILE", "converter.log")  # empty string disables
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# HTTP sources
CONNECT_TIMEOUT = 10  # seconds for connection establishment
READ_TIMEOUT = 60  # seconds for reading response
REQUEST_TIMEOUT = (CONNECT_TIMEOUT, READ_TIMEOUT)
MAX_RETRIES = int(os.getenv("TOON_MAX_RETRIES", "3"))
RETRY_DELAY = 1  # seconds
USER_AGENT = f"json-to-toon/{VERSION}"

# Sample document, chosen to show off tabular arrays
SAMPLE_JSON = """{
  "context": {
    "app": "converter",
    "version": 1.0
  },
  "users": [
    { "id": 1, "name": "Alice", "role": "admin", "active": true },
    { "id": 2, "name": "Bob", "role": "user", "active": false },
    { "id": 3, "name": "Charlie", "role": "guest", "active": true }
  ],
  "tags": ["development", "production", "testing"],
  "settings": {
    "notifications": {
      "email": true,
      "sms": false
    },
    "theme": "dark"
  }
}"""
