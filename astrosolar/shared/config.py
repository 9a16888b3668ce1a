# START OF FILE: astrosolar/shared/config.py

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# --- AI Models & APIs ---
OPENAI_API_URL = "https://api.openai.com/v1"
DEFAULT_TEXT_MODEL = "gpt-3.5-turbo"
DEFAULT_VISION_MODEL = "gpt-4o"
DEFAULT_OPENAI_TIMEOUT = 30.0

# Generation policy, not caller-configurable
MAX_TOKENS = 500
TEMPERATURE = 0.7

# --- Lead capture ---
LEAD_SOURCE = "astrosolar_landing"
LEAD_INITIAL_STATUS = "new"
AIRTABLE_API_URL = "https://api.airtable.com/v0"
DEFAULT_AIRTABLE_TABLE = "Leads"
SUPABASE_LEADS_TABLE = "leads"

# --- Deployment & Runtime ---
PORT = int(os.environ.get('PORT', 8000))
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()


def _env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _env_float(name: str, default: float) -> float:
    value = _env(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logging.getLogger("astrosolar").warning(f"{name}={value!r} is not a number. Using {default}.")
        return default


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, read once and passed into each service."""

    openai_api_key: Optional[str] = None
    openai_api_url: str = OPENAI_API_URL
    openai_text_model: str = DEFAULT_TEXT_MODEL
    openai_vision_model: str = DEFAULT_VISION_MODEL
    openai_timeout: float = DEFAULT_OPENAI_TIMEOUT

    airtable_api_key: Optional[str] = None
    airtable_base_id: Optional[str] = None
    airtable_table_name: str = DEFAULT_AIRTABLE_TABLE

    google_sheets_id: Optional[str] = None
    google_service_account_json: Optional[str] = None

    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            openai_api_key=_env('OPENAI_API_KEY'),
            openai_api_url=_env('OPENAI_API_URL') or OPENAI_API_URL,
            openai_text_model=_env('OPENAI_TEXT_MODEL') or DEFAULT_TEXT_MODEL,
            openai_vision_model=_env('OPENAI_VISION_MODEL') or DEFAULT_VISION_MODEL,
            openai_timeout=_env_float('OPENAI_TIMEOUT', DEFAULT_OPENAI_TIMEOUT),
            airtable_api_key=_env('AIRTABLE_API_KEY'),
            airtable_base_id=_env('AIRTABLE_BASE_ID'),
            airtable_table_name=_env('AIRTABLE_TABLE_NAME') or DEFAULT_AIRTABLE_TABLE,
            google_sheets_id=_env('GOOGLE_SHEETS_ID'),
            google_service_account_json=_env('GOOGLE_SERVICE_ACCOUNT_JSON'),
            supabase_url=_env('SUPABASE_URL'),
            supabase_key=_env('SUPABASE_ANON_KEY'),
        )

# END OF FILE: astrosolar/shared/config.py
