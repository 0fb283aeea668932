"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Extraction ---
EXTRACT_URLS_WITHOUT_PROTOCOL: bool = os.getenv("EXTRACT_URLS_WITHOUT_PROTOCOL", "true").lower() == "true"
MAX_INPUT_LENGTH: int = int(os.getenv("MAX_INPUT_LENGTH", "10000"))

# --- Output ---
DEFAULT_OFFSET_UNIT: str = os.getenv("DEFAULT_OFFSET_UNIT", "codepoint")
VALIDATE_OUTPUT_SCHEMA: bool = os.getenv("VALIDATE_OUTPUT_SCHEMA", "true").lower() == "true"

# --- Logging ---
MAX_TEXT_LOG_CHARS: int = int(os.getenv("MAX_TEXT_LOG_CHARS", "80"))
