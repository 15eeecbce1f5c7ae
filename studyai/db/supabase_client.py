"""Singleton Supabase client for the StudyAI backend."""
from supabase import create_client, Client

from studyai.config import settings
from studyai.utils.logger import get_logger

logger = get_logger(__name__)

_client: Client | None = None


def credentials_configured() -> bool:
    """Return True when both SUPABASE_URL and SUPABASE_KEY are set."""
    return bool(settings.SUPABASE_URL and settings.SUPABASE_KEY)


def get_supabase_client() -> Client:
    """Get or create the Supabase client singleton.

    The client is created on first use so that the API can start without
    credentials; store calls then fail and the handlers report the error.
    """
    global _client
    if _client is None:
        if not credentials_configured():
            raise RuntimeError(
                "SUPABASE_URL and SUPABASE_KEY must be set in environment"
            )
        _client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
        logger.info(f"Supabase client initialized for {settings.SUPABASE_URL}")
    return _client
