"""
Flashcard storage backed by Supabase.
"""
from typing import List, Dict, Any

from studyai.db.supabase_client import get_supabase_client
from studyai.utils.logger import get_logger

logger = get_logger(__name__)


class FlashcardStore:
    """
    Manages flashcard storage and retrieval using Supabase.

    Tables:
        flashcards  (id, user_id, question, answer, difficulty, created_at)
    """

    def __init__(self):
        self._client = get_supabase_client()

    # ------------------------------------------------------------------
    # save_cards
    # ------------------------------------------------------------------
    def save_cards(self, user_id: str, cards: List[Dict[str, Any]]) -> int:
        """Persist generated cards, one insert per card.

        Cards are written sequentially with no surrounding transaction: if
        an insert fails, the cards before it stay persisted and the error
        propagates to the caller.

        Args:
            user_id: Owner of the cards.
            cards: Card dicts with question, answer and difficulty.

        Returns:
            Number of cards written.
        """
        saved = 0
        for card in cards:
            self._client.table("flashcards").insert(
                {
                    "user_id": user_id,
                    "question": card["question"],
                    "answer": card["answer"],
                    "difficulty": card["difficulty"],
                }
            ).execute()
            saved += 1

        logger.info(f"Saved {saved} flashcards for user {user_id}")
        return saved

    # ------------------------------------------------------------------
    # list_cards
    # ------------------------------------------------------------------
    def list_cards(self, user_id: str) -> List[Dict[str, Any]]:
        """Return every flashcard row for *user_id*, in store order."""
        result = (
            self._client.table("flashcards")
            .select("*")
            .eq("user_id", user_id)
            .execute()
        )
        return result.data or []
