"""
Pydantic schemas for API requests
"""
from pydantic import BaseModel, Field
from typing import Optional, Union, Any


class SaveNotesRequest(BaseModel):
    """Request model for saving notes"""
    notes: Optional[str] = Field(None, description="Free-text study notes")
    userId: Optional[Union[str, int]] = Field(None, description="Note owner (default: '1')")


class GenerateRequest(BaseModel):
    """Request model for flashcard and quiz generation"""
    notes: Optional[str] = Field(None, description="Notes to generate from")
    difficulty: Optional[str] = Field(None, description="Difficulty tag, e.g. easy/medium/hard (default: medium)")
    userId: Optional[Union[str, int]] = Field(None, description="Owner of the generated items (default: '1')")


class SubmitAnswerRequest(BaseModel):
    """Request model for submitting a quiz answer"""
    quizId: Any = Field(None, description="ID of the quiz row")
    userAnswer: Any = Field(None, description="Index of the chosen option")
    userId: Optional[Union[str, int]] = Field(None, description="Answering user (default: '1')")
