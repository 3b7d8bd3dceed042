# routes/quiz_generator_openai.py
import logging

import openai

import config
from .errors import UpstreamFailure

logger = logging.getLogger(__name__)


async def call_openai(prompt, client=None):
    """Send a prompt to OpenAI chat completions and return the message content."""
    if client is None:
        if not config.OPENAI_API_KEY:
            logger.error("OpenAI API key not configured")
            raise UpstreamFailure("OpenAI API key not configured")
        client = openai.AsyncOpenAI(api_key=config.OPENAI_API_KEY, timeout=config.PROVIDER_TIMEOUT, max_retries=1)

    try:
        response = await client.chat.completions.create(
            model=config.OPENAI_MODEL,
            messages=[{"role": "user", "content": prompt}],
            temperature=0.7,
        )
    except openai.OpenAIError as e:
        logger.error(f"OpenAI API error: {str(e)}")
        raise UpstreamFailure(f"OpenAI API error: {str(e)}") from e

    if not response.choices or not response.choices[0].message.content:
        logger.error("OpenAI API response has no content")
        raise UpstreamFailure("No AI response")

    content = response.choices[0].message.content
    logger.info(f"OpenAI returned {len(content)} characters")
    return content
