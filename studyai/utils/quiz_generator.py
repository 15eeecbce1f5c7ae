"""
Quiz Generator for StudyAI
Builds multiple-choice questions from study notes by sentence splitting
"""
from typing import List, Dict, Any, Optional

from studyai.config import settings
from studyai.utils.text_utils import split_sentences, preview
from studyai.utils.logger import get_logger

logger = get_logger(__name__)

QUESTION_PREVIEW_LENGTH = 60

# Options 1-3 of every generated question
DISTRACTORS = [
    "Opposite of the statement",
    "A different concept",
    "None of the above",
]


class QuizGenerator:
    """
    Generates one multiple-choice question per qualifying sentence.

    Option 0 is always the sentence itself and is always the correct answer,
    followed by three fixed placeholder options.
    """

    def __init__(self, max_questions: Optional[int] = None):
        self.max_questions = max_questions if max_questions is not None else settings.MAX_QUIZ_QUESTIONS

    def generate_quiz(self, notes: str, difficulty: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Generate quiz questions from notes.

        Args:
            notes: The source text
            difficulty: Tag attached verbatim to every question (default: medium)

        Returns:
            List of dicts with question, options, correctAnswer and difficulty
        """
        difficulty = difficulty or settings.DEFAULT_DIFFICULTY
        sentences = split_sentences(notes)[:self.max_questions]

        quizzes = []
        for sentence in sentences:
            quizzes.append({
                "question": f'Based on your notes, what is the main idea of: "{preview(sentence, QUESTION_PREVIEW_LENGTH)}..."?',
                "options": [sentence] + DISTRACTORS,
                "correctAnswer": 0,
                "difficulty": difficulty,
            })

        logger.info(f"Generated {len(quizzes)} quiz questions (difficulty={difficulty})")
        return quizzes


# Singleton instance
_quiz_generator = None


def get_quiz_generator() -> QuizGenerator:
    """Get or create the quiz generator singleton"""
    global _quiz_generator
    if _quiz_generator is None:
        _quiz_generator = QuizGenerator()
    return _quiz_generator
