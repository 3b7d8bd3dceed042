# models/quiz.py
from pydantic import BaseModel, Field
from datetime import datetime, timezone
from typing import List

from .question import Question


class Quiz(BaseModel):
    id: str
    questions: List[Question]
    answerKey: List[str]  # One normalized answer per question
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ScoreResult(BaseModel):
    correct: int
    total: int
    score: int  # 0-100
