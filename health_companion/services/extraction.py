import re
from typing import Dict, List, Tuple

from health_companion.core.logger import logger
from health_companion.schemas.models import ExtractedKeyword, ExtractionResult
from health_companion.services.vocabulary import VOCABULARIES
from health_companion.utils.scoring import round_half_up

CONTEXT_CHARS = 50

def _term_pattern(term: str) -> re.Pattern:
    # "shortness of breath" -> \bshortness\s+of\s+breath\b
    body = r"\s+".join(re.escape(part) for part in term.split())
    return re.compile(rf"\b{body}\b", re.IGNORECASE)

_TERM_PATTERNS: Tuple[Tuple[str, str, re.Pattern], ...] = tuple(
    (category, term, _term_pattern(term))
    for category, terms in VOCABULARIES.items()
    for term in terms
)

_VITAL_PATTERNS = {
    "blood_pressure": re.compile(r"\b(?:blood\s+pressure|bp)[\s:]*(\d{2,3})\s*/\s*(\d{2,3})", re.I),
    "heart_rate": re.compile(r"\b(?:heart\s+rate|pulse|hr)[\s:]*(\d{2,3})\s*(?:bpm)?", re.I),
    "temperature": re.compile(r"\b(?:temperature|temp)[\s:]*(\d{2,3}\.?\d*)\s*(?:°\s*)?[fc]?", re.I),
    "blood_glucose": re.compile(r"\b(?:blood\s+sugar|blood\s+glucose|glucose)[\s:]*(\d{2,3})\s*(?:mg/dl)?", re.I),
    "weight": re.compile(r"\bweight[\s:]*(\d{2,3}\.?\d*)\s*(?:kgs?|lbs?)\b", re.I),
}

def keyword_confidence(match_count: int, text_length: int) -> int:
    """More hits -> higher score; short documents are scaled down (full weight at 1000 chars)."""
    base = min(100, match_count * 20)
    length_factor = min(1.0, text_length / 1000)
    return round_half_up(base * length_factor)

def _context(text: str, start: int, end: int) -> str:
    lo = max(0, start - CONTEXT_CHARS)
    hi = min(len(text), end + CONTEXT_CHARS)
    return text[lo:hi].strip()

def identify_keywords(text: str) -> List[ExtractedKeyword]:
    keywords: List[ExtractedKeyword] = []
    if not text:
        return keywords

    for category, term, pattern in _TERM_PATTERNS:
        matches = list(pattern.finditer(text))
        if not matches:
            continue
        first = matches[0]
        keywords.append(ExtractedKeyword(
            keyword=term,
            category=category,
            confidence=keyword_confidence(len(matches), len(text)),
            context=_context(text, first.start(), first.end()),
        ))
    return keywords

def extract_vital_signs(text: str) -> Dict[str, str]:
    """Best effort: vitals whose pattern does not match are simply absent."""
    vitals: Dict[str, str] = {}
    if not text:
        return vitals

    for key, pattern in _VITAL_PATTERNS.items():
        m = pattern.search(text)
        if not m:
            continue
        if key == "blood_pressure":
            vitals[key] = f"{m.group(1)}/{m.group(2)}"
        else:
            vitals[key] = m.group(1)
    return vitals

def _preview(items: List[str], limit: int) -> str:
    return ", ".join(items[:limit]) + ("..." if len(items) > limit else "")

def build_summary(
    symptoms: List[str],
    diseases: List[str],
    medications: List[str],
    tests: List[str],
    vitals: Dict[str, str],
) -> str:
    parts: List[str] = []
    if symptoms:
        parts.append(f"Identified {len(symptoms)} symptom(s): {_preview(symptoms, 5)}")
    if diseases:
        parts.append(f"Mentioned condition(s): {', '.join(diseases)}")
    if medications:
        parts.append(f"Medication(s) found: {', '.join(medications)}")
    if tests:
        parts.append(f"Test(s) mentioned: {_preview(tests, 3)}")
    if vitals:
        parts.append("Vital signs: " + ", ".join(f"{k.replace('_', ' ')}: {v}" for k, v in vitals.items()))

    if not parts:
        return "No significant medical information detected in the document."
    return ". ".join(parts)

def extract_keywords(text: str) -> ExtractionResult:
    text = text or ""
    keywords = identify_keywords(text)

    def of(category: str) -> List[str]:
        return [k.keyword for k in keywords if k.category == category]

    symptoms, diseases = of("symptom"), of("disease")
    medications, tests = of("medication"), of("test")
    vitals = extract_vital_signs(text)

    logger.info(
        "extract_keywords: chars=%d keywords=%d vitals=%d",
        len(text), len(keywords), len(vitals),
    )

    return ExtractionResult(
        text=text,
        keywords=keywords,
        symptoms=symptoms,
        diseases=diseases,
        medications=medications,
        tests=tests,
        vital_signs=vitals,
        summary=build_summary(symptoms, diseases, medications, tests, vitals),
    )
