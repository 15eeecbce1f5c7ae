"""StudyAI - notes, flashcards and quizzes backed by Supabase"""

__version__ = "1.0.0"
