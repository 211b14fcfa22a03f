# health_companion/api/routes_assessments.py
import uuid
from fastapi import APIRouter, Depends, HTTPException
from health_companion.agent.graph import assessment_graph
from health_companion.schemas.models import AssessmentRequest, AssessmentResponse
from health_companion.services.security import verify_internal_key

router = APIRouter(prefix="/assessments", tags=["assessments"])

def _config(assessment_id: str):
    return {"configurable": {"thread_id": assessment_id}}

def _stored_state(assessment_id: str):
    snap = assessment_graph.get_state(_config(assessment_id))
    state = snap.values or {}
    if not state.get("report"):
        raise HTTPException(status_code=404, detail="assessment_id not found")
    return state

@router.post("", response_model=AssessmentResponse)
def create_assessment(req: AssessmentRequest):
    if not any(s.strip() for s in req.symptoms) and not (req.document_text or "").strip():
        raise HTTPException(status_code=400, detail="Provide symptoms[] or document_text.")

    assessment_id = "asm_" + uuid.uuid4().hex

    initial_state = {
        "assessment_id": assessment_id,
        "patient_id": req.patient_id,
        "input_symptoms": req.symptoms,
        "document_text": req.document_text or "",
        "allergies": req.allergies,
        "current_medications": req.current_medications,
        "audit": [],
    }

    result = assessment_graph.invoke(initial_state, config=_config(assessment_id))

    report = result.get("report")
    if not report:
        raise HTTPException(status_code=500, detail="Report missing from graph state.")
    return AssessmentResponse(**report)

@router.get("/audit")
def assessment_audit(assessment_id: str, _=Depends(verify_internal_key)):
    state = _stored_state(assessment_id)
    return {"assessment_id": assessment_id, "audit": state.get("audit", [])}

@router.get("/share")
def assessment_share(assessment_id: str, _=Depends(verify_internal_key)):
    state = _stored_state(assessment_id)
    return {"assessment_id": assessment_id, "share_text": state["report"].get("share_text", "")}
