# health_companion/services/matching.py
from typing import Iterable, List, Sequence

from health_companion.core.logger import logger
from health_companion.schemas.models import ConditionRecord, Prediction
from health_companion.services.knowledge_base import CONDITIONS
from health_companion.services.normalize import normalize_symptoms
from health_companion.utils.scoring import clamp_percent

def _matched(condition: ConditionRecord, symptoms: Sequence[str]) -> List[str]:
    # canonical symptom must contain the input, never the other way round
    canonical = [cs.lower() for cs in condition.symptoms]
    return [s for s in symptoms if any(s in cs for cs in canonical)]

def match_conditions(
    symptoms: Iterable[str],
    conditions: Sequence[ConditionRecord] = CONDITIONS,
) -> List[Prediction]:
    """
    Score every condition by the share of ITS OWN symptom list that the input covers.

    A condition with few symptoms can reach 100% on a single hit; that asymmetry
    is kept on purpose. Zero-match conditions are dropped, the rest sorted by
    confidence (stable, so ties keep table order).
    """
    wanted = normalize_symptoms(symptoms)
    if not wanted:
        return []

    predictions: List[Prediction] = []
    for condition in conditions:
        hits = _matched(condition, wanted)
        if not hits:
            continue
        confidence = clamp_percent(len(hits) / len(condition.symptoms) * 100)
        predictions.append(Prediction(
            name=condition.name,
            confidence=confidence,
            symptoms=list(condition.symptoms),
            medicines=list(condition.medicines),
            matched_symptoms=hits,
        ))

    predictions.sort(key=lambda p: p.confidence, reverse=True)
    logger.debug("match_conditions: %d symptom(s) -> %d condition(s)", len(wanted), len(predictions))
    return predictions
