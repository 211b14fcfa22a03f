# health_companion/api/routes_documents.py
from fastapi import APIRouter, File, UploadFile
from health_companion.schemas.models import DocumentAnalysis, ExtractRequest, ExtractionResult
from health_companion.services import documents
from health_companion.services.extraction import extract_keywords

router = APIRouter(prefix="/documents", tags=["documents"])

@router.post("/analyze-text", response_model=ExtractionResult)
def analyze_text(req: ExtractRequest):
    return extract_keywords(req.text)

@router.post("/upload", response_model=DocumentAnalysis)
async def upload(file: UploadFile = File(...)):
    # one byte past the cap is enough for analyze_document to report TOO_LARGE
    data = await file.read(documents.MAX_UPLOAD_BYTES + 1)
    # unsupported formats come back as a status, not an HTTP error
    return documents.analyze_document(file.filename or "document", file.content_type, data)
