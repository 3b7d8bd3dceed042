import re
import logging

from models.question import Question
from .errors import ParseFailure

# Configure logging
logger = logging.getLogger(__name__)

SECTION_HEADER = re.compile(r'^[ \t*_#]*multiple[- ]?choice[ \t]+questions[ \t*_:]*$', re.IGNORECASE | re.MULTILINE)
BLOCK_START = re.compile(r'^\s*(?=\d+\.)', re.MULTILINE)
NUMBER_PREFIX = re.compile(r'^\s*\d+\.\s*')
URL_PATTERN = re.compile(r'https?://\S+')
OPTION_PATTERN = re.compile(r'^([A-D])[.)]\s*(.+)$')
CORRECT_ANSWER_PATTERN = re.compile(r'[*_]*\s*correct\s+answer\s*[*_]*\s*:\s*[*_]*\s*([A-D])?(?![A-Za-z])[*_]*', re.IGNORECASE)

MIN_OPTIONS = 3
MAX_OPTIONS = 4


def _mcq_section(text):
    match = SECTION_HEADER.search(text)
    if match:
        return text[match.end():]
    return text


def _parse_block(block):
    """
    Turn one numbered block into a Question.
    Args:
        block (str): Text starting with "N." followed by option lines.
    Returns:
        Question: The recovered question.
    Raises:
        ParseFailure: The block has no question text or fewer than three options.
    """
    lines = [line.strip() for line in block.strip().splitlines() if line.strip()]
    if not lines or not NUMBER_PREFIX.match(lines[0]):
        raise ParseFailure("block does not start with a question number")

    question_text = NUMBER_PREFIX.sub("", lines[0], count=1)
    question_text = URL_PATTERN.sub("", question_text).strip()
    if not question_text:
        raise ParseFailure("empty question text")

    options = []
    correct_letter = None
    for line in lines[1:]:
        answer_match = CORRECT_ANSWER_PATTERN.search(line)
        if answer_match:
            if answer_match.group(1):
                correct_letter = answer_match.group(1).upper()
            line = line[:answer_match.start()].strip()

        option_match = OPTION_PATTERN.match(line)
        if option_match:
            option_text = option_match.group(2).strip()
            if option_text:
                options.append(option_text)

    if len(options) < MIN_OPTIONS:
        raise ParseFailure(f"only {len(options)} options recovered for '{question_text}'")

    options = options[:MAX_OPTIONS]
    answer_index = 0
    if correct_letter:
        answer_index = ord(correct_letter) - ord("A")
        if answer_index >= len(options):
            answer_index = 0

    return Question(question=question_text, options=options, answer=options[answer_index])


def parse_questions(raw_text):
    """
    Recover questions from free-form provider text such as:

        **Multiple-Choice Questions**
        1. What is X?
        A) foo
        B) bar
        C) baz
        *Correct Answer:* B

    Blocks that cannot be parsed are dropped. Never raises; returns an empty
    list when nothing recognisable is found.
    """
    if not raw_text or not isinstance(raw_text, str):
        return []

    questions = []
    for block in BLOCK_START.split(_mcq_section(raw_text)):
        if not block.strip():
            continue
        try:
            questions.append(_parse_block(block))
        except ParseFailure as e:
            logger.debug(f"Dropping question block: {str(e)}")
    logger.info(f"Recovered {len(questions)} questions from free-form text")
    return questions
