"""
API client for the StudyAI backend

Each method mirrors one route and returns the decoded JSON body. Transport
and decoding failures are logged and returned as {"error": message}.
"""
from typing import Any, Dict, Optional

import requests

from studyai.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000/api"


class StudyAIClient:
    """Thin wrapper around the StudyAI REST endpoints"""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, session=None, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _request(self, action: str, method: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            response = self.session.request(
                method,
                f"{self.base_url}/{path}",
                timeout=self.timeout,
                **kwargs
            )
            return response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"Error {action}: {e}")
            return {"error": str(e)}

    @staticmethod
    def _with_user(payload: Dict[str, Any], user_id: Optional[str]) -> Dict[str, Any]:
        if user_id is not None:
            payload["userId"] = user_id
        return payload

    # ------------------------------------------------------------------
    # Notes
    # ------------------------------------------------------------------
    def save_notes(self, notes: str, user_id: Optional[str] = None) -> Dict[str, Any]:
        """Save notes to the backend"""
        body = self._with_user({"notes": notes}, user_id)
        return self._request("saving notes", "POST", "notes", json=body)

    def get_notes(self, user_id: Optional[str] = None) -> Dict[str, Any]:
        """Get notes from the backend"""
        params = self._with_user({}, user_id)
        return self._request("getting notes", "GET", "notes", params=params)

    # ------------------------------------------------------------------
    # Flashcards
    # ------------------------------------------------------------------
    def generate_flashcards(self, notes: str, difficulty: str = "medium", user_id: Optional[str] = None) -> Dict[str, Any]:
        """Generate flashcards from notes"""
        body = self._with_user({"notes": notes, "difficulty": difficulty}, user_id)
        return self._request("generating flashcards", "POST", "generate-flashcards", json=body)

    def get_flashcards(self, user_id: Optional[str] = None) -> Dict[str, Any]:
        """Get saved flashcards"""
        params = self._with_user({}, user_id)
        return self._request("getting flashcards", "GET", "flashcards", params=params)

    # ------------------------------------------------------------------
    # Quiz
    # ------------------------------------------------------------------
    def generate_quiz(self, notes: str, difficulty: str = "medium", user_id: Optional[str] = None) -> Dict[str, Any]:
        """Generate quiz questions from notes"""
        body = self._with_user({"notes": notes, "difficulty": difficulty}, user_id)
        return self._request("generating quiz", "POST", "generate-quiz", json=body)

    def get_quiz(self, user_id: Optional[str] = None) -> Dict[str, Any]:
        """Get saved quiz questions"""
        params = self._with_user({}, user_id)
        return self._request("getting quiz", "GET", "quiz", params=params)

    def submit_quiz_answer(self, quiz_id: Any, user_answer: Any, user_id: Optional[str] = None) -> Dict[str, Any]:
        """Submit an answer to a quiz question"""
        body = self._with_user({"quizId": quiz_id, "userAnswer": user_answer}, user_id)
        return self._request("submitting answer", "POST", "quiz/submit", json=body)
