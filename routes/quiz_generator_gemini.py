import httpx
import logging

import config
from .errors import UpstreamFailure

logger = logging.getLogger(__name__)


async def call_gemini(prompt, transport=None):
    """
    Send a prompt to the Gemini generateContent endpoint.
    Args:
        prompt (str): The full generation prompt.
        transport: Optional httpx transport, used by tests.
    Returns:
        str: The text of the first candidate.
    Raises:
        UpstreamFailure: Missing key, network/HTTP error, timeout or an empty response.
    """
    if not config.GEMINI_API_KEY:
        raise UpstreamFailure("Gemini API key not configured")

    url = f"{config.GEMINI_API_URL}/{config.GEMINI_MODEL}:generateContent"
    payload = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {"responseMimeType": "application/json", "temperature": 0.7},
    }

    async with httpx.AsyncClient(timeout=config.PROVIDER_TIMEOUT, transport=transport) as client:
        try:
            response = await client.post(url, params={"key": config.GEMINI_API_KEY}, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Gemini API HTTP error: {e.response.status_code}")
            raise UpstreamFailure(f"Gemini API returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Gemini API request error: {str(e)}")
            raise UpstreamFailure(f"Gemini API request error: {str(e)}") from e
        except ValueError as e:
            logger.error(f"Gemini API returned invalid JSON: {str(e)}")
            raise UpstreamFailure("Gemini API returned invalid JSON") from e

    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        logger.error(f"Gemini API response missing candidate text: {data}")
        raise UpstreamFailure("No AI response") from e

    logger.info(f"Gemini returned {len(text)} characters")
    return text
