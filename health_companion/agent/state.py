from typing import Any, Dict, List, Optional, TypedDict

class AssessmentState(TypedDict, total=False):
    # identity (assessment_id doubles as LangGraph thread_id)
    assessment_id: str
    patient_id: Optional[str]

    # inputs
    input_symptoms: List[str]
    document_text: str
    allergies: List[str]
    current_medications: List[str]

    # intermediate
    source: str                      # SYMPTOMS | DOCUMENT
    symptoms: List[str]              # normalized symptoms fed to the matcher
    extraction: Optional[Dict[str, Any]]
    predictions: List[Dict[str, Any]]
    safety: List[Dict[str, Any]]

    # outputs
    report: Dict[str, Any]           # AssessmentResponse dict
    audit: List[Dict[str, Any]]
