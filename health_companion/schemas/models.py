from typing import Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

KeywordCategory = Literal["symptom", "disease", "medication", "test", "vital"]
AcquisitionStatus = Literal["OK", "UNSUPPORTED_FORMAT", "TOO_LARGE"]
AssessmentSource = Literal["SYMPTOMS", "DOCUMENT"]

SAFETY_NOTE = (
    "Not medical advice. Suggestions come from a fixed lookup table and a "
    "best-effort allergy/interaction screen. Always consult a healthcare professional."
)

DEFAULT_MEDICINE_PRICE = 10.00
DEFAULT_MEDICINE_CATEGORY = "Medication"

# ---------------------------
# Static knowledge base records
# ---------------------------
class ConditionRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    symptoms: Tuple[str, ...]
    medicines: Tuple[str, ...]

class ConditionInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    diet: Tuple[str, ...] = ()
    precautions: Tuple[str, ...] = ()

class MedicineRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    category: str = DEFAULT_MEDICINE_CATEGORY
    price: float = DEFAULT_MEDICINE_PRICE
    interactions: Tuple[str, ...] = ()

# ---------------------------
# Per-request results
# ---------------------------
class Prediction(BaseModel):
    name: str
    confidence: int = Field(..., ge=0, le=100)
    symptoms: List[str]
    medicines: List[str]
    matched_symptoms: List[str] = Field(default_factory=list)

class SafetyVerdict(BaseModel):
    medicine: str
    is_safe: bool
    reason: str
    price: float
    category: str

class SafetyStats(BaseModel):
    safe: int
    unsafe: int
    total: int

class ExtractedKeyword(BaseModel):
    keyword: str
    category: KeywordCategory
    confidence: int = Field(..., ge=0, le=100)
    context: str = ""

class ExtractionResult(BaseModel):
    text: str
    keywords: List[ExtractedKeyword] = Field(default_factory=list)
    symptoms: List[str] = Field(default_factory=list)
    diseases: List[str] = Field(default_factory=list)
    medications: List[str] = Field(default_factory=list)
    tests: List[str] = Field(default_factory=list)
    vital_signs: Dict[str, str] = Field(default_factory=dict)
    summary: str = ""

class TextAcquisition(BaseModel):
    status: AcquisitionStatus
    filename: str
    text: Optional[str] = None
    message: str = ""

class DocumentAnalysis(BaseModel):
    status: AcquisitionStatus
    filename: str
    message: str = ""
    extraction: Optional[ExtractionResult] = None

class ShareableReport(BaseModel):
    date: str
    predictions: List[Prediction]
    safety: List[SafetyVerdict]
    symptoms: List[str]
    allergies: List[str] = Field(default_factory=list)
    current_medications: List[str] = Field(default_factory=list)

# ---------------------------
# API requests / responses
# ---------------------------
class MatchRequest(BaseModel):
    symptoms: List[str] = Field(default_factory=list)

class SafetyRequest(BaseModel):
    medicines: List[str]
    allergies: List[str] = Field(default_factory=list)
    current_medications: List[str] = Field(default_factory=list)

class SafetyResponse(BaseModel):
    verdicts: List[SafetyVerdict]
    stats: SafetyStats
    safety_note: str = SAFETY_NOTE

class ExtractRequest(BaseModel):
    text: str

class AssessmentRequest(BaseModel):
    patient_id: Optional[str] = None
    symptoms: List[str] = Field(default_factory=list)
    document_text: Optional[str] = None  # used only when symptoms is empty
    allergies: List[str] = Field(default_factory=list)
    current_medications: List[str] = Field(default_factory=list)

class AssessmentResponse(BaseModel):
    assessment_id: str
    source: AssessmentSource
    symptoms: List[str]
    predictions: List[Prediction]
    top_condition: Optional[Prediction] = None
    condition_info: Optional[ConditionInfo] = None
    alternatives: List[Prediction] = Field(default_factory=list)
    safety: List[SafetyVerdict] = Field(default_factory=list)
    stats: SafetyStats
    recommended_medicines: List[SafetyVerdict] = Field(default_factory=list)
    extraction: Optional[ExtractionResult] = None
    share_text: str = ""
    safety_note: str = SAFETY_NOTE

class QueryRequest(BaseModel):
    message: str

class QueryResponse(BaseModel):
    answer: str
    safety_note: str = SAFETY_NOTE
