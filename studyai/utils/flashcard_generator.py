"""
Flashcard Generator for StudyAI
Builds flashcards from study notes by sentence splitting
"""
from typing import List, Dict, Optional

from studyai.config import settings
from studyai.utils.text_utils import split_sentences, preview
from studyai.utils.logger import get_logger

logger = get_logger(__name__)

QUESTION_PREVIEW_LENGTH = 50


class FlashcardGenerator:
    """
    Turns the first few qualifying sentences of a note into question/answer cards.
    The answer is the full sentence; the question embeds a short preview of it.
    """

    def __init__(self, max_cards: Optional[int] = None):
        self.max_cards = max_cards if max_cards is not None else settings.MAX_FLASHCARDS

    def generate_flashcards(self, notes: str, difficulty: Optional[str] = None) -> List[Dict[str, str]]:
        """
        Generate flashcards from notes.

        Args:
            notes: The source text
            difficulty: Tag attached verbatim to every card (default: medium)

        Returns:
            List of dicts with question, answer and difficulty
        """
        difficulty = difficulty or settings.DEFAULT_DIFFICULTY
        sentences = split_sentences(notes)[:self.max_cards]

        cards = [
            {
                "question": f'What do you know about: "{preview(sentence, QUESTION_PREVIEW_LENGTH)}..."?',
                "answer": sentence,
                "difficulty": difficulty,
            }
            for sentence in sentences
        ]
        logger.info(f"Generated {len(cards)} flashcards (difficulty={difficulty})")
        return cards


# Singleton instance
_flashcard_generator = None


def get_flashcard_generator() -> FlashcardGenerator:
    """Get or create the flashcard generator singleton"""
    global _flashcard_generator
    if _flashcard_generator is None:
        _flashcard_generator = FlashcardGenerator()
    return _flashcard_generator
