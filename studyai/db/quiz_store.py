"""Quiz store backed by Supabase.

Covers the ``quizzes`` table and the ``quiz_answers`` log written on every
submission.
"""

from typing import Any

from studyai.utils.logger import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _supabase():
    """Return the shared Supabase client."""
    from studyai.db.supabase_client import get_supabase_client
    return get_supabase_client()


# ---------------------------------------------------------------------------
# Quiz CRUD
# ---------------------------------------------------------------------------


def save_quizzes(user_id: str, quizzes: list[dict[str, Any]]) -> int:
    """Insert generated quiz items one at a time.

    *quizzes* is a list of dicts, each containing:
        question, options (list), correctAnswer, difficulty

    There is no batching and no rollback; a failed insert raises after the
    earlier items have been written.
    """
    sb = _supabase()

    saved = 0
    for quiz in quizzes:
        sb.table("quizzes").insert({
            "user_id": user_id,
            "question": quiz["question"],
            "options": quiz["options"],
            "correct_answer": quiz["correctAnswer"],
            "difficulty": quiz["difficulty"],
        }).execute()
        saved += 1

    logger.info(f"Saved {saved} quiz questions for user {user_id}")
    return saved


def list_quizzes(user_id: str) -> list[dict[str, Any]]:
    """List all quiz rows for *user_id*."""
    sb = _supabase()

    result = (
        sb.table("quizzes")
        .select("*")
        .eq("user_id", user_id)
        .execute()
    )
    return result.data or []


# ---------------------------------------------------------------------------
# Answer submission
# ---------------------------------------------------------------------------


def submit_answer(quiz_id: Any, user_id: str, user_answer: Any) -> dict[str, Any] | None:
    """Check an answer against the stored index and log it.

    Returns a dict with is_correct and correct_answer, or None when the quiz
    does not exist (nothing is logged in that case).
    """
    if quiz_id is None:
        return None

    sb = _supabase()

    q_result = (
        sb.table("quizzes")
        .select("correct_answer")
        .eq("id", quiz_id)
        .limit(1)
        .execute()
    )

    if not q_result.data:
        logger.warning(f"Quiz {quiz_id} not found")
        return None

    correct_answer = q_result.data[0]["correct_answer"]
    is_correct = _answers_match(user_answer, correct_answer)

    sb.table("quiz_answers").insert({
        "quiz_id": quiz_id,
        "user_id": user_id,
        "user_answer": user_answer,
        "is_correct": is_correct,
    }).execute()
    logger.info(
        f"Answer submitted for quiz {quiz_id} (user {user_id}) - correct: {is_correct}"
    )

    return {
        "is_correct": is_correct,
        "correct_answer": correct_answer,
    }


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _answers_match(user_answer: Any, correct_answer: Any) -> bool:
    """Strict equality: only a number equal to the stored index counts.

    Strings such as "0" and booleans never match.
    """
    if isinstance(user_answer, bool) or not isinstance(user_answer, (int, float)):
        return False
    return user_answer == correct_answer
