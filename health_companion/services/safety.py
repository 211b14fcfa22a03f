# health_companion/services/safety.py
"""
Allergy / interaction screen for suggested medicines.

This is a substring heuristic over a small static table. It knows nothing about
dosage or severity, and "safe" only means no listed conflict was found.
"""
from typing import Iterable, List, Optional, Sequence

from health_companion.core.logger import logger
from health_companion.schemas.models import (
    SafetyStats,
    SafetyVerdict,
    DEFAULT_MEDICINE_CATEGORY,
    DEFAULT_MEDICINE_PRICE,
)
from health_companion.services.knowledge_base import find_medicine
from health_companion.services.normalize import clean_terms

REASON_ALLERGY = "Allergy detected"
REASON_SAFE = "Safe to use"

def _allergy_hit(medicine: str, allergies: Sequence[str]) -> bool:
    med = medicine.lower()
    return any(a.lower() in med or med in a.lower() for a in allergies)

def _interaction_hit(partners: Sequence[str], current: Sequence[str]) -> Optional[str]:
    # table order decides which partner gets reported
    current_low = [c.lower() for c in current]
    for partner in partners:
        p = partner.lower()
        if any(p in c for c in current_low):
            return partner
    return None

def check_medicine(medicine: str, allergies: Sequence[str], current_medications: Sequence[str]) -> SafetyVerdict:
    record = find_medicine(medicine)
    price = record.price if record else DEFAULT_MEDICINE_PRICE
    category = record.category if record else DEFAULT_MEDICINE_CATEGORY

    if medicine.strip() and _allergy_hit(medicine.strip(), allergies):
        return SafetyVerdict(medicine=medicine, is_safe=False, reason=REASON_ALLERGY, price=price, category=category)

    partner = _interaction_hit(record.interactions if record else (), current_medications)
    if partner:
        return SafetyVerdict(
            medicine=medicine, is_safe=False, reason=f"Interacts with {partner}", price=price, category=category,
        )

    return SafetyVerdict(medicine=medicine, is_safe=True, reason=REASON_SAFE, price=price, category=category)

def evaluate_safety(
    medicines: Iterable[str],
    allergies: Iterable[str] | None = None,
    current_medications: Iterable[str] | None = None,
) -> List[SafetyVerdict]:
    """One verdict per medicine, same order as given."""
    allergy_list = clean_terms(allergies)
    current_list = clean_terms(current_medications)

    verdicts = [check_medicine(str(m or ""), allergy_list, current_list) for m in (medicines or [])]
    logger.info(
        "evaluate_safety: medicines=%d allergies=%d current=%d unsafe=%d",
        len(verdicts), len(allergy_list), len(current_list), sum(1 for v in verdicts if not v.is_safe),
    )
    return verdicts

def safety_stats(verdicts: Sequence[SafetyVerdict]) -> SafetyStats:
    safe = sum(1 for v in verdicts if v.is_safe)
    return SafetyStats(safe=safe, unsafe=len(verdicts) - safe, total=len(verdicts))
