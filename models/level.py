# models/level.py
from pydantic import BaseModel


class LevelResult(BaseModel):
    correct: int
    total: int
    percentage: int  # 0-100
    level: str  # "Beginner", "Intermediate" or "Advanced"
