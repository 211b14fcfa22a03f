from typing import List
from fastapi import APIRouter
from health_companion.schemas.models import QueryRequest, QueryResponse
from health_companion.services.assistant import QUICK_QUESTIONS, assistant_reply

router = APIRouter(prefix="/assistant", tags=["assistant"])

@router.post("/query", response_model=QueryResponse)
def query(req: QueryRequest):
    return QueryResponse(answer=assistant_reply(req.message))

@router.get("/quick-questions", response_model=List[str])
def quick_questions():
    return QUICK_QUESTIONS
