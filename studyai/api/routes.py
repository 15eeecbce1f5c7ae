"""
API Routes for notes, flashcards and quizzes
"""
from typing import Optional, Union

from fastapi import APIRouter, HTTPException

from studyai.models.schemas import SaveNotesRequest, GenerateRequest, SubmitAnswerRequest
from studyai.utils.flashcard_generator import get_flashcard_generator
from studyai.utils.quiz_generator import get_quiz_generator
from studyai.db import note_store
from studyai.db import quiz_store
from studyai.db.flashcard_store import FlashcardStore
from studyai.utils.logger import get_logger
from studyai.config import settings

logger = get_logger(__name__)

# Create router
router = APIRouter(prefix="/api", tags=["Study"])


def _resolve_user_id(user_id: Optional[Union[str, int]]) -> str:
    """Fall back to the default user when no identifier was sent"""
    return str(user_id) if user_id else settings.DEFAULT_USER_ID


# =============================================================================
# NOTES ENDPOINTS
# =============================================================================

@router.post("/notes")
def save_notes(body: Optional[SaveNotesRequest] = None):
    """Save notes, overwriting the previous note of this user"""
    body = body or SaveNotesRequest()
    try:
        if not body.notes:
            raise HTTPException(status_code=400, detail="Notes are required")

        note_store.save_note(_resolve_user_id(body.userId), body.notes)

        return {
            "success": True,
            "message": "Notes saved",
            "notesLength": len(body.notes)
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error saving notes: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/notes")
def get_notes(userId: Optional[str] = None):
    """Get the saved notes, or an empty string"""
    try:
        content = note_store.load_note(_resolve_user_id(userId))
        return {"notes": content or ""}

    except Exception as e:
        logger.error(f"Error getting notes: {e}")
        return {"notes": ""}


# =============================================================================
# FLASHCARD ENDPOINTS
# =============================================================================

@router.post("/generate-flashcards")
def generate_flashcards(body: Optional[GenerateRequest] = None):
    """Generate flashcards from notes and save them"""
    body = body or GenerateRequest()
    try:
        if not body.notes or not body.notes.strip():
            raise HTTPException(status_code=400, detail="Notes are required")

        generator = get_flashcard_generator()
        flashcards = generator.generate_flashcards(body.notes, difficulty=body.difficulty)

        store = FlashcardStore()
        store.save_cards(_resolve_user_id(body.userId), flashcards)

        return {
            "success": True,
            "flashcards": flashcards,
            "message": f"Generated {len(flashcards)} flashcards"
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error generating flashcards: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/flashcards")
def get_flashcards(userId: Optional[str] = None):
    """List all flashcards of a user"""
    try:
        store = FlashcardStore()
        return {"flashcards": store.list_cards(_resolve_user_id(userId))}

    except Exception as e:
        logger.error(f"Error getting flashcards: {e}")
        return {"flashcards": []}


# =============================================================================
# QUIZ ENDPOINTS
# =============================================================================

@router.post("/generate-quiz")
def generate_quiz(body: Optional[GenerateRequest] = None):
    """Generate quiz questions from notes and save them"""
    body = body or GenerateRequest()
    try:
        if not body.notes or not body.notes.strip():
            raise HTTPException(status_code=400, detail="Notes are required")

        generator = get_quiz_generator()
        quizzes = generator.generate_quiz(body.notes, difficulty=body.difficulty)

        quiz_store.save_quizzes(_resolve_user_id(body.userId), quizzes)

        return {
            "success": True,
            "quizzes": quizzes,
            "message": f"Generated {len(quizzes)} quiz questions"
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error generating quiz: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/quiz")
def get_quiz(userId: Optional[str] = None):
    """List all quiz questions of a user"""
    try:
        return {"quizzes": quiz_store.list_quizzes(_resolve_user_id(userId))}

    except Exception as e:
        logger.error(f"Error getting quiz: {e}")
        return {"quizzes": []}


@router.post("/quiz/submit")
def submit_quiz_answer(body: Optional[SubmitAnswerRequest] = None):
    """Check an answer and record it"""
    body = body or SubmitAnswerRequest()
    try:
        result = quiz_store.submit_answer(body.quizId, _resolve_user_id(body.userId), body.userAnswer)

        if result is None:
            raise HTTPException(status_code=404, detail="Quiz not found")

        return {
            "correct": result["is_correct"],
            "correctAnswer": result["correct_answer"],
            "message": "Correct!" if result["is_correct"] else "Incorrect. Try again!"
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error submitting answer: {e}")
        raise HTTPException(status_code=500, detail=str(e))
