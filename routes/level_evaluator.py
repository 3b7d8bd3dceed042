import logging

import config
from models.level import LevelResult
from .errors import InvalidInput

logger = logging.getLogger(__name__)


def percentage(correct, total):
    """Whole-number percentage, rounding halves up; 0 when there is nothing to score."""
    if total <= 0:
        return 0
    return int(100 * correct / total + 0.5)


def answers_match(submitted, expected):
    if submitted is None or expected is None:
        return False
    return str(submitted).strip().lower() == str(expected).strip().lower()


def level_for(percent, advanced_threshold=None, intermediate_threshold=None):
    advanced_threshold = config.LEVEL_ADVANCED_THRESHOLD if advanced_threshold is None else advanced_threshold
    intermediate_threshold = config.LEVEL_INTERMEDIATE_THRESHOLD if intermediate_threshold is None else intermediate_threshold
    if percent >= advanced_threshold:
        return "Advanced"
    if percent >= intermediate_threshold:
        return "Intermediate"
    return "Beginner"


def evaluate(answers, correct_answers) -> LevelResult:
    if not isinstance(answers, (list, tuple)) or not isinstance(correct_answers, (list, tuple)):
        raise InvalidInput("answers and correctAnswers must both be arrays")
    if len(answers) != len(correct_answers):
        raise InvalidInput(f"Expected {len(correct_answers)} answers, got {len(answers)}")

    total = len(correct_answers)
    correct = sum(1 for submitted, expected in zip(answers, correct_answers) if answers_match(submitted, expected))
    percent = percentage(correct, total)
    level = level_for(percent) if total else "Beginner"
    logger.info(f"Level evaluated: {correct}/{total} ({percent}%) -> {level}")
    return LevelResult(correct=correct, total=total, percentage=percent, level=level)
