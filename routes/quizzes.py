# routes/quizzes.py
from fastapi import APIRouter, HTTPException, Depends, Response
from pydantic import BaseModel
from typing import List, Optional
import logging

import config
from models.question import PublicQuestion
from models.quiz import ScoreResult
from .errors import InvalidInput, NotFound
from .quiz_generator import generate_quiz_questions
from .quiz_store import QuizStore, get_quiz_store

# Configure logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

router = APIRouter(tags=["quizzes"])

QUIZ_ID_HEADER = "X-Quiz-Id"


class GenerateQuizRequest(BaseModel):
    docText: Optional[str] = None
    topic: Optional[str] = None


class EvaluateQuizRequest(BaseModel):
    quizId: str
    answers: Optional[list] = None


@router.post("/generate", response_model=List[PublicQuestion])
async def generate_quiz(request: GenerateQuizRequest, response: Response, store: QuizStore = Depends(get_quiz_store)):
    try:
        questions = await generate_quiz_questions(doc_text=request.docText, topic=request.topic)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not questions:
        logger.error("Generation produced no questions")
        raise HTTPException(status_code=500, detail="MCQ generation failed")

    quiz_id = store.create(questions)
    response.headers[QUIZ_ID_HEADER] = quiz_id
    # Answer key stays server-side
    return [q.public() for q in questions]


@router.post("/evaluate-quiz", response_model=ScoreResult)
async def evaluate_quiz(request: EvaluateQuizRequest, store: QuizStore = Depends(get_quiz_store)):
    try:
        return store.score(request.quizId, request.answers)
    except NotFound:
        raise HTTPException(status_code=404, detail="Quiz not found")
