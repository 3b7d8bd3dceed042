import re
import logging

logger = logging.getLogger(__name__)

LETTER_PATTERN = re.compile(r'^[A-D]$', re.IGNORECASE)
INDEX_PATTERN = re.compile(r'^\d+$')


def _option_at(options, index):
    if 0 <= index < len(options):
        return options[index]
    logger.debug(f"Answer index {index} out of range for {len(options)} options, using first option")
    return options[0]


def normalize(raw_answer, options):
    """
    Convert a letter, index or literal answer into the canonical option text.
    Args:
        raw_answer: "A"-"D" (any case), a non-negative int or digit string, or option text.
        options (list): The question's options, in display order.
    Returns:
        str: The matching option text. Letters and indexes that fall outside
             the options, and empty answers, resolve to the first option.
             Unrecognised text is returned trimmed. Never raises.
    """
    options = [str(option) for option in options or []]

    if raw_answer is None or isinstance(raw_answer, bool):
        return options[0] if options else ""

    if isinstance(raw_answer, int):
        if raw_answer < 0:
            return str(raw_answer)
        return _option_at(options, raw_answer) if options else str(raw_answer)

    answer = str(raw_answer).strip()
    if not answer:
        return options[0] if options else ""
    if not options:
        return answer

    # Literal option text wins, so an already-normalized answer stays put
    if answer in (option.strip() for option in options):
        return next(option for option in options if option.strip() == answer)
    for option in options:
        if option.strip().lower() == answer.lower():
            return option

    if LETTER_PATTERN.match(answer):
        return _option_at(options, ord(answer.upper()) - ord("A"))
    if INDEX_PATTERN.match(answer):
        return _option_at(options, int(answer))
    return answer
