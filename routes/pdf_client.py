import httpx
import logging

import config
from .errors import PdfExtractionError

logger = logging.getLogger(__name__)


async def extract_pdf_text(document_url, transport=None):
    """
    Ask the PDF extraction service for the text of a hosted PDF.
    Args:
        document_url (str): GitHub page URL or raw URL of the PDF.
        transport: Optional httpx transport, used by tests.
    Returns:
        str: Extracted text.
    Raises:
        PdfExtractionError: Any failure of the service, reported opaquely.
    """
    rpc_body = {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "tools/call",
        "params": {"name": "read_github_pdf", "arguments": {"github_url": document_url}},
    }
    logger.info(f"Requesting PDF text for {document_url}")

    async with httpx.AsyncClient(timeout=config.PDF_TIMEOUT, transport=transport) as client:
        try:
            response = await client.post(config.PDF_SERVICE_URL, json=rpc_body)
            data = response.json()
        except httpx.RequestError as e:
            logger.error(f"PDF service request error: {str(e)}")
            raise PdfExtractionError(f"PDF service unreachable: {str(e)}") from e
        except ValueError as e:
            logger.error(f"PDF service returned invalid JSON (status {response.status_code})")
            raise PdfExtractionError("PDF service returned invalid JSON") from e

    result = data.get("result") if isinstance(data, dict) else None
    if response.is_success and isinstance(result, dict) and isinstance(result.get("text"), str):
        logger.info(f"PDF service returned {len(result['text'])} characters")
        return result["text"]

    error = data.get("error") if isinstance(data, dict) else None
    message = error.get("message") if isinstance(error, dict) else error
    logger.error(f"PDF service error: {message or 'Upstream error'}")
    raise PdfExtractionError(message or "Upstream error")
