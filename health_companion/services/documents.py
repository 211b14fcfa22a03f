# health_companion/services/documents.py
from pathlib import PurePath
from typing import Optional

from health_companion.core.config import MAX_UPLOAD_BYTES
from health_companion.core.logger import logger
from health_companion.schemas.models import DocumentAnalysis, TextAcquisition
from health_companion.services.extraction import extract_keywords

_TEXT_SUFFIXES = {".txt"}
_TEXT_TYPES = {"text/plain"}

def _is_plain_text(filename: str, content_type: Optional[str]) -> bool:
    suffix = PurePath(filename or "").suffix.lower()
    ctype = (content_type or "").split(";")[0].strip().lower()
    return suffix in _TEXT_SUFFIXES or ctype in _TEXT_TYPES

def _format_size(n: int) -> str:
    if n >= 1024 * 1024:
        return f"{n / (1024 * 1024):g}MB"
    if n >= 1024:
        return f"{n / 1024:g}KB"
    return f"{n} bytes"

def acquire_text(filename: str, content_type: Optional[str], data: bytes) -> TextAcquisition:
    """
    Only plain text is read. PDF, DOC(X) and anything else come back as
    UNSUPPORTED_FORMAT rather than an error or an empty string.
    """
    filename = filename or "document"
    size = len(data or b"")

    if size > MAX_UPLOAD_BYTES:
        logger.warning("acquire_text: %s rejected, %d bytes > %d", filename, size, MAX_UPLOAD_BYTES)
        return TextAcquisition(
            status="TOO_LARGE",
            filename=filename,
            message=f"File size must be less than {_format_size(MAX_UPLOAD_BYTES)}.",
        )

    if not _is_plain_text(filename, content_type):
        logger.info("acquire_text: %s (%s) unsupported", filename, content_type)
        return TextAcquisition(
            status="UNSUPPORTED_FORMAT",
            filename=filename,
            message="Text extraction is only supported for plain-text (.txt) files. "
                    "Please convert PDF/DOC documents to text first.",
        )

    text = (data or b"").decode("utf-8-sig", errors="replace")
    return TextAcquisition(status="OK", filename=filename, text=text)

def analyze_document(filename: str, content_type: Optional[str], data: bytes) -> DocumentAnalysis:
    acq = acquire_text(filename, content_type, data)
    if acq.status != "OK":
        return DocumentAnalysis(status=acq.status, filename=acq.filename, message=acq.message)

    extraction = extract_keywords(acq.text or "")
    return DocumentAnalysis(
        status="OK",
        filename=acq.filename,
        message=f"Found {len(extraction.keywords)} medical keyword(s).",
        extraction=extraction,
    )
