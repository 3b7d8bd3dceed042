# models/question.py
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

DIFFICULTIES = ("Beginner", "Intermediate", "Advanced")


class PublicQuestion(BaseModel):
    question: str
    options: List[str] = Field(..., min_length=2, max_length=4)
    difficulty: Optional[str] = None  # "Beginner", "Intermediate" or "Advanced"

    @field_validator("difficulty", mode="before")
    @classmethod
    def coerce_difficulty(cls, value):
        # Providers answer with "beginner", "ADVANCED", "easy"...; keep only known levels
        if not isinstance(value, str):
            return None
        for level in DIFFICULTIES:
            if value.strip().lower() == level.lower():
                return level
        return None


class Question(PublicQuestion):
    answer: str  # Canonical option text, never a letter or an index

    def public(self) -> PublicQuestion:
        return PublicQuestion(question=self.question, options=list(self.options), difficulty=self.difficulty)
