# routes/pdf.py
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import Optional
import logging

import config
from .errors import PdfExtractionError
from .pdf_client import extract_pdf_text

# Configure logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

router = APIRouter(tags=["pdf"])


class ReadPdfRequest(BaseModel):
    github_url: Optional[str] = None


@router.post("/read-pdf")
async def read_pdf(request: ReadPdfRequest):
    if not request.github_url or not request.github_url.strip():
        raise HTTPException(status_code=400, detail="github_url is required")
    try:
        text = await extract_pdf_text(request.github_url.strip())
    except PdfExtractionError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"text": text}
