import logging
from functools import lru_cache

from supabase import Client, ClientOptions, create_client

from .config import get_settings

logger = logging.getLogger(__name__)

PLACEHOLDER_HOST = "your-project.supabase.co"


@lru_cache()
def get_supabase() -> Client:
    """Process-wide client for the deals store, created on first use."""
    settings = get_settings()
    url = str(settings.supabase_url)

    if PLACEHOLDER_HOST in url:
        raise RuntimeError(
            "SUPABASE_URL is still the .env.example placeholder. "
            "Set your project URL and service key."
        )
    logger.info("Connecting to Supabase at %s (schema %s)", url, settings.supabase_schema)
    return create_client(url, settings.supabase_key, options=ClientOptions(schema=settings.supabase_schema))
