"""Data models for StudyAI"""

from studyai.models.schemas import (
    SaveNotesRequest,
    GenerateRequest,
    SubmitAnswerRequest,
)
