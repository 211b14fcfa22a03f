# health_companion/services/reporting.py
from typing import List

from health_companion.schemas.models import ShareableReport

DISCLAIMER = (
    "Disclaimer: This is for educational purposes only. "
    "Always consult a healthcare professional."
)

def _bullets(title: str, items: List[str]) -> str:
    return f"{title}:\n" + "\n".join(f"• {i}" for i in items) + "\n\n"

def build_share_text(report: ShareableReport) -> str:
    """Plain-text assessment summary for copy/paste sharing."""
    text = "Medical Assessment Report\n"
    text += f"Date: {report.date}\n\n"

    if report.predictions:
        top = report.predictions[0]
        text += f"Primary Condition: {top.name} ({top.confidence}% confidence)\n\n"
    else:
        text += "Primary Condition: No matching condition found\n\n"

    if report.symptoms:
        text += _bullets("Symptoms", report.symptoms)
    if report.allergies:
        text += _bullets("Allergies", report.allergies)
    if report.current_medications:
        text += _bullets("Current Medications", report.current_medications)

    safe = [v for v in report.safety if v.is_safe]
    if safe:
        text += _bullets("Recommended Medications", [f"{v.medicine} - {v.category}" for v in safe])

    flagged = [v for v in report.safety if not v.is_safe]
    if flagged:
        text += _bullets("Flagged Medications", [f"{v.medicine} - {v.reason}" for v in flagged])

    text += DISCLAIMER
    return text
