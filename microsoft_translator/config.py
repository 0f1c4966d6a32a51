"""Environment variable loading with defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

from microsoft_translator.client import BASE_URL

# Load .envdefault first (base defaults), then .env (overrides)
_base_dir = Path(__file__).resolve().parent.parent
load_dotenv(_base_dir / ".envdefault")
load_dotenv(_base_dir / ".env", override=True)

# Credentials
AZURE_TRANSLATOR_KEY: str = os.environ.get("AZURE_TRANSLATOR_KEY", "")
# Empty means no region header (single global resource)
AZURE_TRANSLATOR_REGION: str = os.environ.get("AZURE_TRANSLATOR_REGION", "")

# Endpoint
AZURE_TRANSLATOR_ENDPOINT: str = os.environ.get("AZURE_TRANSLATOR_ENDPOINT", "") or BASE_URL
AZURE_TRANSLATOR_TIMEOUT: float = float(os.environ.get("AZURE_TRANSLATOR_TIMEOUT", "30.0"))
