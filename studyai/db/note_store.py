"""Note store backed by Supabase.

One row per user identifier in the ``notes`` table; every save overwrites
the row wholesale.
"""
from datetime import datetime, timezone
from typing import Optional

from studyai.db.supabase_client import get_supabase_client
from studyai.utils.logger import get_logger

logger = get_logger(__name__)


def save_note(user_id: str, content: str) -> None:
    """Insert or overwrite the note for *user_id*, stamping the current time."""
    sb = get_supabase_client()
    sb.table("notes").upsert(
        {
            "id": user_id,
            "content": content,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        },
        on_conflict="id",
    ).execute()
    logger.info(f"Saved note for user {user_id} ({len(content)} chars)")


def load_note(user_id: str) -> Optional[str]:
    """Return the stored note content for *user_id*, or None if there is none."""
    sb = get_supabase_client()
    result = (
        sb.table("notes")
        .select("content")
        .eq("id", user_id)
        .limit(1)
        .execute()
    )
    if not result.data:
        return None
    return result.data[0].get("content")
