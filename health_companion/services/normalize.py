# health_companion/services/normalize.py
from typing import Iterable, List

def clean_terms(values: Iterable[str] | None) -> List[str]:
    """Strip, drop blanks, de-duplicate case-insensitively. Keeps first spelling."""
    seen = set()
    out: List[str] = []
    for v in values or []:
        s = " ".join(str(v or "").split())
        if not s:
            continue
        key = s.lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(s)
    return out

def normalize_symptoms(values: Iterable[str] | None) -> List[str]:
    return [s.lower() for s in clean_terms(values)]
