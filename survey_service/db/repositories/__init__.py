# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from survey_service.db.repositories.answer_repository import AnswerRepository

__all__ = ["AnswerRepository"]
