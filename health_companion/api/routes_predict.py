# health_companion/api/routes_predict.py
from typing import List
from fastapi import APIRouter, HTTPException
from health_companion.schemas.models import (
    ConditionInfo, MatchRequest, Prediction, SafetyRequest, SafetyResponse,
)
from health_companion.services.knowledge_base import get_condition_info, list_symptoms
from health_companion.services.matching import match_conditions
from health_companion.services.safety import evaluate_safety, safety_stats

router = APIRouter(tags=["predict"])

@router.get("/conditions/symptoms", response_model=List[str])
def symptoms():
    return list_symptoms()

@router.get("/conditions/{name}/info", response_model=ConditionInfo)
def condition_info(name: str):
    info = get_condition_info(name)
    if not info:
        raise HTTPException(status_code=404, detail=f"Unknown condition: {name}")
    return info

@router.post("/predict/conditions", response_model=List[Prediction])
def predict_conditions(req: MatchRequest):
    return match_conditions(req.symptoms)

@router.post("/predict/safety", response_model=SafetyResponse)
def predict_safety(req: SafetyRequest):
    verdicts = evaluate_safety(req.medicines, req.allergies, req.current_medications)
    return SafetyResponse(verdicts=verdicts, stats=safety_stats(verdicts))
