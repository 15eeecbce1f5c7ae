"""HTTP client for the StudyAI API"""

from studyai.client.api_client import StudyAIClient
