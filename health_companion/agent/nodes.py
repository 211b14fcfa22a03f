# health_companion/agent/nodes.py
from datetime import datetime, timezone
from typing import Any, Dict, List

from health_companion.agent.state import AssessmentState
from health_companion.core.config import ALTERNATIVES_LIMIT
from health_companion.core.logger import logger
from health_companion.schemas.models import Prediction, SafetyVerdict, ShareableReport
from health_companion.services.extraction import extract_keywords
from health_companion.services.knowledge_base import get_condition_info
from health_companion.services.matching import match_conditions
from health_companion.services.normalize import clean_terms, normalize_symptoms
from health_companion.services.reporting import build_share_text
from health_companion.services.safety import evaluate_safety, safety_stats

def _audit(state: AssessmentState, event: str, extra: Dict[str, Any] | None = None) -> Dict[str, Any]:
    audit = list(state.get("audit") or [])
    audit.append({"event": event, "at": datetime.now(timezone.utc).isoformat(timespec="seconds"), **(extra or {})})
    return {"audit": audit}

def extract_node(state: AssessmentState) -> Dict[str, Any]:
    given = normalize_symptoms(state.get("input_symptoms"))
    if given:
        return {
            "source": "SYMPTOMS",
            "symptoms": given,
            "extraction": None,
            **_audit(state, "extract.skip", {"reason": "symptoms provided", "count": len(given)}),
        }

    extraction = extract_keywords(state.get("document_text") or "")
    return {
        "source": "DOCUMENT",
        "symptoms": list(extraction.symptoms),
        "extraction": extraction.model_dump(),
        **_audit(state, "extract.document.done", {
            "keywords": len(extraction.keywords),
            "symptoms": len(extraction.symptoms),
        }),
    }

def match_node(state: AssessmentState) -> Dict[str, Any]:
    predictions = match_conditions(state.get("symptoms") or [])
    top = predictions[0].name if predictions else None
    return {
        "predictions": [p.model_dump() for p in predictions],
        **_audit(state, "match.done", {"count": len(predictions), "top": top}),
    }

def route_after_match(state: AssessmentState) -> str:
    # nothing to screen without a top condition
    return "safety" if state.get("predictions") else "report"

def safety_node(state: AssessmentState) -> Dict[str, Any]:
    top = state["predictions"][0]
    verdicts = evaluate_safety(
        top.get("medicines", []),
        state.get("allergies") or [],
        state.get("current_medications") or [],
    )
    stats = safety_stats(verdicts)
    return {
        "safety": [v.model_dump() for v in verdicts],
        **_audit(state, "safety.done", {"condition": top.get("name"), "unsafe": stats.unsafe}),
    }

def report_node(state: AssessmentState) -> Dict[str, Any]:
    predictions = [Prediction(**p) for p in (state.get("predictions") or [])]
    verdicts = [SafetyVerdict(**v) for v in (state.get("safety") or [])]
    allergies = clean_terms(state.get("allergies"))
    current = clean_terms(state.get("current_medications"))
    symptoms: List[str] = list(state.get("symptoms") or [])

    top = predictions[0] if predictions else None
    info = get_condition_info(top.name) if top else None

    share_text = build_share_text(ShareableReport(
        date=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
        predictions=predictions,
        safety=verdicts,
        symptoms=symptoms,
        allergies=allergies,
        current_medications=current,
    ))

    report = {
        "assessment_id": state["assessment_id"],
        "source": state.get("source") or "SYMPTOMS",
        "symptoms": symptoms,
        "predictions": [p.model_dump() for p in predictions],
        "top_condition": top.model_dump() if top else None,
        "condition_info": info.model_dump(mode="json") if info else None,
        "alternatives": [p.model_dump() for p in predictions[1:1 + ALTERNATIVES_LIMIT]],
        "safety": [v.model_dump() for v in verdicts],
        "stats": safety_stats(verdicts).model_dump(),
        "recommended_medicines": [v.model_dump() for v in verdicts if v.is_safe],
        "extraction": state.get("extraction"),
        "share_text": share_text,
    }

    logger.info(
        "assessment %s: source=%s conditions=%d verdicts=%d",
        state["assessment_id"], report["source"], len(predictions), len(verdicts),
    )
    return {"report": report, **_audit(state, "report.done")}
