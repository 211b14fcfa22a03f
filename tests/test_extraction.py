from health_companion.services.extraction import (
    build_summary,
    extract_keywords,
    extract_vital_signs,
    keyword_confidence,
)
from health_companion.services.vocabulary import VOCABULARIES


def test_symptoms_and_blood_pressure_from_short_note():
    result = extract_keywords("Patient has fever and cough, BP 120/80")
    by_kw = {k.keyword: k for k in result.keywords}
    assert by_kw["fever"].category == "symptom"
    assert by_kw["cough"].category == "symptom"
    assert result.vital_signs["blood_pressure"] == "120/80"
    assert result.symptoms == ["fever", "cough"]
    assert result.summary == "Identified 2 symptom(s): fever, cough. Vital signs: blood pressure: 120/80"


def test_vocabularies_are_disjoint():
    seen = set()
    for terms in VOCABULARIES.values():
        assert len(terms) == len(set(terms))
        assert not seen & set(terms)
        seen |= set(terms)


def test_confidence_scales_with_count_and_length():
    assert keyword_confidence(1, 1000) == 20
    assert keyword_confidence(3, 5000) == 60
    assert keyword_confidence(9, 2000) == 100
    assert keyword_confidence(1, 500) == 10
    assert keyword_confidence(1, 39) == 1


def test_long_document_confidence():
    text = "cough " * 3 + "x" * 1200
    [kw] = [k for k in extract_keywords(text).keywords if k.keyword == "cough"]
    assert kw.confidence == 60


def test_word_boundaries_and_flexible_whitespace():
    result = extract_keywords("painful\nshortness   of\nbreath")
    assert "pain" not in result.symptoms
    assert "shortness of breath" in result.symptoms


def test_context_window_is_clipped_and_uses_first_hit():
    text = "A" * 80 + " nausea " + "B" * 80 + " nausea"
    [kw] = [k for k in extract_keywords(text).keywords if k.keyword == "nausea"]
    assert kw.context.startswith("A")
    assert "nausea" in kw.context
    assert len(kw.context) <= 50 + len("nausea") + 50

    [kw] = extract_keywords("nausea").keywords
    assert kw.context == "nausea"


def test_vital_sign_patterns():
    text = "Heart rate: 72 bpm. Temp 98.6 F. Glucose: 110 mg/dL. Weight: 70 kg. Blood pressure 130 / 85"
    vitals = extract_vital_signs(text)
    assert vitals == {
        "blood_pressure": "130/85",
        "heart_rate": "72",
        "temperature": "98.6",
        "blood_glucose": "110",
        "weight": "70",
    }


def test_weight_accepts_plural_units():
    assert extract_vital_signs("Weight 70 kgs")["weight"] == "70"
    assert extract_vital_signs("weight: 154 lbs")["weight"] == "154"


def test_missing_vitals_are_omitted():
    assert extract_vital_signs("weight stable, no numbers here") == {}


def test_categories_and_summary_order():
    text = ("Known diabetes and asthma. Taking metformin. "
            "HbA1c and lipid panel ordered. Complains of headache.")
    result = extract_keywords(text)
    assert result.diseases == ["diabetes", "asthma"]
    assert result.medications == ["metformin"]
    assert result.tests == ["lipid panel", "hba1c"]
    assert result.summary.split(". ")[0].startswith("Identified 1 symptom(s)")
    assert "Mentioned condition(s): diabetes, asthma" in result.summary
    assert "Medication(s) found: metformin" in result.summary


def test_summary_truncates_long_lists():
    summary = build_summary(["a", "b", "c", "d", "e", "f"], [], [], ["t1", "t2", "t3", "t4"], {})
    assert summary == "Identified 6 symptom(s): a, b, c, d, e.... Test(s) mentioned: t1, t2, t3..."


def test_empty_text_has_fallback_summary():
    result = extract_keywords("")
    assert result.keywords == []
    assert result.vital_signs == {}
    assert result.summary == "No significant medical information detected in the document."


def test_extraction_is_idempotent():
    text = "BP 140/90, pulse 88, fever and rash"
    assert extract_keywords(text) == extract_keywords(text)
