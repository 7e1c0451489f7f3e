from abc import ABC, abstractmethod
from typing import List, Optional

from quiz_platform.app.schemas.question import QuestionCreate, QuestionRead
from quiz_platform.app.schemas.quiz import QuizCreate, QuizRead


class QuizRepository(ABC):
    @abstractmethod
    def create(self, data: QuizCreate) -> QuizRead:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, quiz_id: int) -> Optional[QuizRead]:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> List[QuizRead]:
        raise NotImplementedError


class QuestionRepository(ABC):
    @abstractmethod
    def create(self, data: QuestionCreate) -> QuestionRead:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, question_id: int) -> Optional[QuestionRead]:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> List[QuestionRead]:
        raise NotImplementedError

    @abstractmethod
    def find_all_by_quiz_id(self, quiz_id: int) -> List[QuestionRead]:
        raise NotImplementedError
