# config.py
import os
from dotenv import load_dotenv

load_dotenv()


def _optional_float(name):
    value = os.getenv(name)
    return float(value) if value else None


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Text-generation provider: "gemini", "openai" or "mock"
AI_PROVIDER = os.getenv("AI_PROVIDER", "gemini").lower()
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_API_URL = os.getenv("GEMINI_API_URL", "https://generativelanguage.googleapis.com/v1beta/models")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
PROVIDER_TIMEOUT = float(os.getenv("PROVIDER_TIMEOUT", "30"))

# Quiz policy
QUIZ_QUESTION_COUNT = int(os.getenv("QUIZ_QUESTION_COUNT", "5"))
DOC_TEXT_LIMIT = int(os.getenv("DOC_TEXT_LIMIT", "12000"))
LEVEL_ADVANCED_THRESHOLD = int(os.getenv("LEVEL_ADVANCED_THRESHOLD", "80"))
LEVEL_INTERMEDIATE_THRESHOLD = int(os.getenv("LEVEL_INTERMEDIATE_THRESHOLD", "60"))
QUIZ_TTL_SECONDS = _optional_float("QUIZ_TTL_SECONDS")  # None keeps quizzes for the process lifetime

# PDF extraction microservice
PDF_SERVICE_URL = os.getenv("PDF_SERVICE_URL", "http://localhost:3333")
PDF_TIMEOUT = float(os.getenv("PDF_TIMEOUT", "60"))

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if origin.strip()]
