from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
import logging
import uuid

import config
from models.quiz import Quiz, ScoreResult
from .answer_normalizer import normalize
from .errors import NotFound
from .level_evaluator import answers_match, percentage

logger = logging.getLogger(__name__)


class QuizStore(ABC):
    """Holds generated quizzes and their answer keys, keyed by quiz id."""

    @abstractmethod
    def create(self, questions) -> str:
        ...

    @abstractmethod
    def get(self, quiz_id) -> Quiz:
        ...

    def score(self, quiz_id, answers) -> ScoreResult:
        """
        Score a submission against the stored answer key.
        Args:
            quiz_id (str): Identifier returned by create().
            answers (list): Selected option texts, index-aligned with the questions.
        Returns:
            ScoreResult: Positional, case-insensitive matches. Missing entries count as wrong.
        Raises:
            NotFound: Unknown or expired quiz id.
        """
        quiz = self.get(quiz_id)
        answers = list(answers or [])
        total = len(quiz.answerKey)
        correct = sum(
            1 for i, expected in enumerate(quiz.answerKey)
            if i < len(answers) and answers_match(answers[i], expected)
        )
        result = ScoreResult(correct=correct, total=total, score=percentage(correct, total))
        logger.info(f"Scored quiz {quiz_id}: {result.correct}/{result.total} ({result.score}%)")
        return result


class InMemoryQuizStore(QuizStore):
    """Process-lifetime store; entries are written once and never updated."""

    def __init__(self, ttl_seconds=None):
        self.ttl_seconds = ttl_seconds
        self._quizzes = {}

    def __len__(self):
        return len(self._quizzes)

    def _expired(self, quiz, now):
        return self.ttl_seconds is not None and now - quiz.createdAt > timedelta(seconds=self.ttl_seconds)

    def _evict_expired(self):
        if self.ttl_seconds is None:
            return
        now = datetime.now(timezone.utc)
        for quiz_id in [qid for qid, quiz in list(self._quizzes.items()) if self._expired(quiz, now)]:
            self._quizzes.pop(quiz_id, None)
            logger.info(f"Evicted expired quiz {quiz_id}")

    def create(self, questions):
        self._evict_expired()
        questions = list(questions)
        answer_key = [normalize(q.answer, q.options) for q in questions]
        quiz_id = uuid.uuid4().hex
        self._quizzes[quiz_id] = Quiz(id=quiz_id, questions=questions, answerKey=answer_key)
        logger.info(f"Stored quiz {quiz_id} with {len(questions)} questions")
        return quiz_id

    def get(self, quiz_id):
        quiz = self._quizzes.get(quiz_id)
        if quiz is not None and self._expired(quiz, datetime.now(timezone.utc)):
            self._quizzes.pop(quiz_id, None)
            quiz = None
        if quiz is None:
            logger.warning(f"Quiz not found: {quiz_id}")
            raise NotFound(f"Quiz {quiz_id} not found")
        return quiz


_store = InMemoryQuizStore(ttl_seconds=config.QUIZ_TTL_SECONDS)


def get_quiz_store() -> QuizStore:
    return _store
