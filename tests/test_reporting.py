from health_companion.schemas.models import ShareableReport
from health_companion.services.matching import match_conditions
from health_companion.services.reporting import DISCLAIMER, build_share_text
from health_companion.services.safety import evaluate_safety


def test_share_text_sections():
    predictions = match_conditions(["fever", "cough"])
    verdicts = evaluate_safety(predictions[0].medicines, ["cetirizine"], [])
    text = build_share_text(ShareableReport(
        date="2024-05-01",
        predictions=predictions,
        safety=verdicts,
        symptoms=["fever", "cough"],
        allergies=["cetirizine"],
    ))
    assert "Date: 2024-05-01" in text
    assert "Primary Condition: Common Cold (33% confidence)" in text
    assert "• fever" in text
    assert "Allergies:\n• cetirizine" in text
    assert "Current Medications" not in text
    assert "• Paracetamol - Pain Relief" in text
    assert "• Cetirizine - Allergy detected" in text
    assert text.endswith(DISCLAIMER)


def test_share_text_without_predictions():
    text = build_share_text(ShareableReport(date="today", predictions=[], safety=[], symptoms=["odd"]))
    assert "No matching condition found" in text
    assert "Recommended Medications" not in text


def test_share_text_skips_empty_symptom_block():
    text = build_share_text(ShareableReport(date="today", predictions=[], safety=[], symptoms=[]))
    assert "Symptoms:" not in text
    assert text.endswith(DISCLAIMER)
