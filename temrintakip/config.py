"""
Configuration management for TemrinTakip.
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


# Supabase (hosted store). The service key is a deployment secret.
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY", "")
STUDENTS_TABLE = os.getenv("STUDENTS_TABLE", "students")

# Gemini
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

# Server configuration
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
DEBUG = env_flag("DEBUG")
SECRET_KEY = os.getenv("SECRET_KEY", "temrintakip-dev")

# Grading configuration
EXERCISE_COUNT = 5
MIN_SCORE = 0
MAX_SCORE = 100
PASS_THRESHOLD = float(os.getenv("PASS_THRESHOLD", "50"))


class Config:
    """Application configuration class."""

    def __init__(self):
        self.supabase_url = SUPABASE_URL
        self.supabase_service_key = SUPABASE_SERVICE_KEY
        self.students_table = STUDENTS_TABLE
        self.gemini_api_key = GEMINI_API_KEY
        self.gemini_model = GEMINI_MODEL
        self.pass_threshold = PASS_THRESHOLD

    def to_dict(self):
        return {
            "supabase_url": self.supabase_url,
            "students_table": self.students_table,
            "gemini_model": self.gemini_model,
            "gemini_configured": bool(self.gemini_api_key),
            "pass_threshold": self.pass_threshold,
        }


# Global config instance
config = Config()
