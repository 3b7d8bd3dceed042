# routes/quiz_generator.py
import asyncio
import json
import logging
import re
from typing import Any, NamedTuple, Optional

from pydantic import ValidationError

import config
from models.question import DIFFICULTIES, Question
from .answer_normalizer import normalize
from .errors import InvalidInput, UpstreamFailure
from .question_parser import parse_questions
from .quiz_generator_gemini import call_gemini
from .quiz_generator_openai import call_openai

# Configure logging
logger = logging.getLogger(__name__)

STRUCTURED = "structured"
UNSTRUCTURED = "unstructured"
MALFORMED = "malformed"

CODE_FENCE = re.compile(r'```(?:json)?', re.IGNORECASE)
MAX_OPTIONS = 4


class DecodedResponse(NamedTuple):
    kind: str  # STRUCTURED, UNSTRUCTURED or MALFORMED
    payload: Any = None
    raw: Optional[str] = None  # Original provider text, kept for the text parser


def build_quiz_prompt(source, count, from_document=False):
    if from_document:
        subject = f"the following document content:\n\n{source}\n\n"
    else:
        subject = f'"{source}".\n\n'
    return (
        f"You are an MCQ generator.\n\n"
        f"Create exactly {count} multiple choice questions on {subject}"
        f"Rules:\n"
        f"1. Each question must have 4 options.\n"
        f"2. Only one option is correct.\n"
        f"3. Do NOT explain.\n"
        f"4. Return ONLY a valid JSON array, no markdown and no surrounding text.\n\n"
        f"Format:\n"
        f'[{{"question": "Question here", "options": ["first", "second", "third", "fourth"], "answer": "A"}}]\n'
        f"The 'answer' field is the letter (A-D) of the correct option."
    )


def build_level_test_prompt(topic, count):
    return (
        f"You are assessing a learner's knowledge of \"{topic}\".\n\n"
        f"Create exactly {count} multiple choice questions of progressively increasing difficulty, "
        f"starting at Beginner and ending at Advanced.\n\n"
        f"Rules:\n"
        f"1. Each question must have 4 options.\n"
        f"2. Only one option is correct.\n"
        f"3. Each question has a 'difficulty' field: Beginner, Intermediate or Advanced.\n"
        f"4. Return ONLY a valid JSON array, no markdown and no surrounding text.\n\n"
        f"Format:\n"
        f'[{{"question": "Question here", "options": ["first", "second", "third", "fourth"], '
        f'"answer": "A", "difficulty": "Beginner"}}]'
    )


def strip_code_fences(text):
    return CODE_FENCE.sub("", text).strip()


def decode_response(raw_content):
    """
    Classify raw provider output.
    Args:
        raw_content (str | None): Text returned by the provider.
    Returns:
        DecodedResponse: STRUCTURED with a list of question dicts (JSON wrapped in
                         prose only counts when it is a list of objects), UNSTRUCTURED
                         with the raw text, or MALFORMED when there is no content.
    """
    if not isinstance(raw_content, str) or not raw_content.strip():
        return DecodedResponse(MALFORMED)

    text = strip_code_fences(raw_content)
    candidates = [text]
    start, end = text.find("["), text.rfind("]")
    if start != -1 and start < end and text[start:end + 1] != text:
        candidates.append(text[start:end + 1])  # JSON wrapped in prose

    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except ValueError:
            continue
        if isinstance(data, dict) and isinstance(data.get("questions"), list):
            data = data["questions"]
        if isinstance(data, list) and (candidate is text or all(isinstance(item, dict) for item in data)):
            return DecodedResponse(STRUCTURED, data, raw_content)

    return DecodedResponse(UNSTRUCTURED, raw_content, raw_content)


def question_from_item(item):
    """Map one provider JSON object to a Question, or None when it is unusable."""
    if not isinstance(item, dict):
        return None
    text = item.get("question") or item.get("text")
    options = item.get("options")
    if not isinstance(text, str) or not text.strip() or not isinstance(options, list):
        return None

    options = [str(option).strip() for option in options if option is not None and str(option).strip()][:MAX_OPTIONS]
    if len(options) < 2:
        return None

    raw_answer = item.get("answer", item.get("correctAnswer"))
    answer = normalize(raw_answer, options)
    if answer not in options:
        logger.warning(f"Dropping question with answer outside its options: {text.strip()}")
        return None

    try:
        return Question(question=text.strip(), options=options, answer=answer, difficulty=item.get("difficulty"))
    except ValidationError as e:
        logger.warning(f"Dropping invalid question: {str(e)}")
        return None


def from_structured(decoded, topic, count, with_difficulty):
    if decoded.kind != STRUCTURED:
        return None
    questions = [q for q in (question_from_item(item) for item in decoded.payload) if q is not None]
    return questions or None


def from_text(decoded, topic, count, with_difficulty):
    # Also runs when JSON decoded but yielded no usable questions
    if decoded.kind == MALFORMED:
        return None
    return parse_questions(decoded.raw) or None


def difficulty_schedule(count):
    """Beginner -> Advanced spread across count questions."""
    return [DIFFICULTIES[min(i * len(DIFFICULTIES) // max(count, 1), len(DIFFICULTIES) - 1)] for i in range(count)]


def mock_questions(topic, count, with_difficulty=False):
    subject = topic.strip() if topic and topic.strip() else "the provided material"
    difficulties = difficulty_schedule(count) if with_difficulty else [None] * count
    questions = []
    for i in range(count):
        options = [
            f"A core concept of {subject}",
            f"An unrelated fact about {subject}",
            f"A common misconception about {subject}",
            "None of the above",
        ]
        questions.append(Question(
            question=f"Question {i + 1}: Which statement best describes {subject}?",
            options=options,
            answer=options[0],
            difficulty=difficulties[i],
        ))
    return questions


def from_mock(decoded, topic, count, with_difficulty):
    logger.warning(f"Falling back to mock questions for '{topic}'")
    return mock_questions(topic, count, with_difficulty)


# Tried in order; the last one always succeeds
STRATEGIES = [from_structured, from_text, from_mock]


async def request_completion(prompt):
    """Dispatch the prompt to the configured provider. Returns None for the mock provider."""
    provider = config.AI_PROVIDER
    if provider == "gemini":
        return await call_gemini(prompt)
    elif provider == "openai":
        return await call_openai(prompt)
    elif provider == "mock":
        return None
    raise UpstreamFailure(f"Unsupported AI provider: {provider}")


async def generate_questions(prompt, topic, count=None, with_difficulty=False):
    """
    Produce between 1 and count questions for a prompt.
    Provider errors and unusable output never escape: the strategy chain
    degrades from structured JSON to free-text parsing to mock questions.
    """
    count = count or config.QUIZ_QUESTION_COUNT
    try:
        raw_content = await asyncio.wait_for(request_completion(prompt), timeout=config.PROVIDER_TIMEOUT)
    except asyncio.TimeoutError:
        logger.error(f"Provider timed out after {config.PROVIDER_TIMEOUT}s")
        raw_content = None
    except UpstreamFailure as e:
        logger.error(f"Provider failure: {str(e)}")
        raw_content = None

    decoded = decode_response(raw_content)
    logger.info(f"Provider response decoded as {decoded.kind}")

    questions = []
    for strategy in STRATEGIES:
        questions = strategy(decoded, topic, count, with_difficulty)
        if questions:
            logger.info(f"{strategy.__name__} produced {len(questions)} questions")
            break
    questions = questions[:count]

    if with_difficulty:
        schedule = difficulty_schedule(len(questions))
        questions = [
            q if q.difficulty else q.model_copy(update={"difficulty": schedule[i]})
            for i, q in enumerate(questions)
        ]
    return questions


async def generate_quiz_questions(doc_text=None, topic=None):
    if doc_text and doc_text.strip():
        source = doc_text[:config.DOC_TEXT_LIMIT]
        logger.info(f"Generating quiz from document text ({len(source)} characters)")
        prompt = build_quiz_prompt(source, config.QUIZ_QUESTION_COUNT, from_document=True)
        return await generate_questions(prompt, topic)
    if topic and topic.strip():
        logger.info(f"Generating quiz from topic: {topic.strip()}")
        prompt = build_quiz_prompt(topic.strip(), config.QUIZ_QUESTION_COUNT)
        return await generate_questions(prompt, topic.strip())
    raise InvalidInput("Topic is required")


async def generate_level_test(topic):
    if not isinstance(topic, str) or not topic.strip():
        raise InvalidInput("Topic is required")
    topic = topic.strip()
    logger.info(f"Generating level test for topic: {topic}")
    prompt = build_level_test_prompt(topic, config.QUIZ_QUESTION_COUNT)
    return await generate_questions(prompt, topic, with_difficulty=True)
