from .question_engine import ALL_TOPICS, QuizEngine, filter_by_topic, resolve_mode

__all__ = ["ALL_TOPICS", "QuizEngine", "filter_by_topic", "resolve_mode"]
