"""
Configuration settings for the StudyAI backend
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Base paths
PACKAGE_DIR = Path(__file__).resolve().parent.parent
STATIC_DIR = Path(os.getenv("STATIC_DIR", str(PACKAGE_DIR / "static")))

# API Configuration
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("PORT", 3000))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Supabase
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")

# CORS (all origins during development)
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

# =============================================================================
# Study Features Settings
# =============================================================================
DEFAULT_USER_ID = os.getenv("DEFAULT_USER_ID", "1")
DEFAULT_DIFFICULTY = "medium"
MAX_FLASHCARDS = int(os.getenv("MAX_FLASHCARDS", 10))
MAX_QUIZ_QUESTIONS = int(os.getenv("MAX_QUIZ_QUESTIONS", 5))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "")
