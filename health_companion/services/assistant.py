# health_companion/services/assistant.py
import re
from typing import List, Tuple

QUICK_QUESTIONS = [
    "What should I do if I miss a medication dose?",
    "How do I read my lab results?",
    "What are common side effects?",
    "When should I see a doctor?",
]

_GREETING_RE = re.compile(r"\b(hello|hi|hey)\b", re.I)

# (keywords, reply); first hit wins
_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("symptom", "pain", "hurt"),
     "I understand you're experiencing symptoms. While I can provide general information, "
     "it's important to consult with a healthcare professional for proper diagnosis and treatment. "
     "Would you like me to explain what you should discuss with your doctor?"),
    (("medication", "medicine", "drug"),
     "I can provide general information about medications, but I cannot give specific medical advice. "
     "For questions about your medications, including dosages, side effects, or interactions, "
     "please consult your pharmacist or healthcare provider. What would you like to know?"),
    (("emergency", "urgent"),
     "If you're experiencing a medical emergency, please call emergency services immediately. "
     "For urgent but non-emergency situations, contact your healthcare provider or visit an urgent care center."),
]

GREETING_REPLY = (
    "Hello! I'm here to help with general health information. "
    "Remember, I'm not a replacement for professional medical advice. What would you like to know?"
)
THANKS_REPLY = "You're welcome! Is there anything else I can help you with regarding your health?"
DEFAULT_REPLY = (
    "Thank you for your question. I can provide general health information, but for specific medical "
    "concerns, diagnoses, or treatment recommendations, please consult with a qualified healthcare "
    "professional. How else can I assist you?"
)

def assistant_reply(message: str) -> str:
    txt = (message or "").lower()
    for keys, reply in _RULES:
        if any(k in txt for k in keys):
            return reply
    if _GREETING_RE.search(txt):
        return GREETING_REPLY
    if "thank" in txt:
        return THANKS_REPLY
    return DEFAULT_REPLY
