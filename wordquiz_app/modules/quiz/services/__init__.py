from .quiz_service import QuizService
from .quiz_session_manager import QuizSessionManager

__all__ = ["QuizService", "QuizSessionManager"]
