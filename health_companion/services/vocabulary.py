# health_companion/services/vocabulary.py
"""
Fixed term lists used to scan free text.

Each term belongs to exactly one category. When a term appears in more than one
list the earlier category keeps it (symptom > disease > medication > test > vital).
"""
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

_SYMPTOM_TERMS = [
    "fever", "cough", "headache", "pain", "nausea", "vomiting", "diarrhea", "constipation",
    "fatigue", "weakness", "dizziness", "shortness of breath", "chest pain", "abdominal pain",
    "joint pain", "muscle pain", "back pain", "sore throat", "runny nose", "sneezing",
    "congestion", "wheezing", "rash", "itching", "swelling", "inflammation", "bleeding",
    "bruising", "numbness", "tingling", "blurred vision", "double vision", "hearing loss",
    "tinnitus", "loss of appetite", "weight loss", "weight gain", "insomnia", "anxiety",
    "depression", "confusion", "memory loss", "seizure", "tremor", "palpitations",
    "irregular heartbeat", "high blood pressure", "low blood pressure", "frequent urination",
    "painful urination", "blood in urine", "blood in stool", "jaundice", "yellowing",
]

_DISEASE_TERMS = [
    "diabetes", "hypertension", "asthma", "copd", "pneumonia", "bronchitis", "flu",
    "influenza", "common cold", "migraine", "gastritis", "ulcer", "gastroenteritis",
    "uti", "urinary tract infection", "kidney infection", "hepatitis", "cirrhosis",
    "anemia", "leukemia", "cancer", "tumor", "carcinoma", "arthritis", "osteoporosis",
    "fibromyalgia", "lupus", "rheumatoid arthritis", "psoriasis",
    "eczema", "dermatitis", "allergy", "allergic reaction", "anaphylaxis", "sepsis",
    "infection", "bacterial infection", "viral infection", "fungal infection",
    "heart disease", "coronary artery disease", "heart failure", "stroke", "tia",
    "transient ischemic attack", "epilepsy", "parkinson", "alzheimer", "dementia",
]

_MEDICATION_TERMS = [
    "paracetamol", "acetaminophen", "ibuprofen", "aspirin", "naproxen", "diclofenac",
    "metformin", "insulin", "glipizide", "sitagliptin", "amlodipine", "losartan",
    "metoprolol", "enalapril", "lisinopril", "atorvastatin", "simvastatin", "pravastatin",
    "omeprazole", "pantoprazole", "ranitidine", "cimetidine", "sertraline", "fluoxetine",
    "citalopram", "escitalopram", "alprazolam", "lorazepam", "diazepam", "salbutamol",
    "albuterol", "budesonide", "fluticasone", "montelukast", "cetirizine", "loratadine",
    "fexofenadine", "ciprofloxacin", "amoxicillin", "azithromycin", "doxycycline",
    "penicillin", "cephalexin", "nitrofurantoin", "trimethoprim", "sumatriptan",
    "rizatriptan", "warfarin", "heparin", "clopidogrel",
]

_TEST_TERMS = [
    "blood test", "cbc", "complete blood count", "lipid panel", "liver function test",
    "lft", "kidney function test", "kft", "glucose test", "hba1c", "hemoglobin a1c",
    "cholesterol", "triglycerides", "creatinine", "bun", "alt", "ast", "bilirubin",
    "urine test", "urinalysis", "culture", "x-ray", "ct scan", "mri", "ultrasound",
    "ecg", "ekg", "echocardiogram", "stress test", "biopsy", "endoscopy", "colonoscopy",
    "mammogram", "pap smear", "psa test", "thyroid test", "tsh", "t3", "t4",
    "vitamin d", "b12", "folate", "iron", "ferritin",
]

_VITAL_TERMS = [
    "blood pressure", "bp", "systolic", "diastolic", "heart rate", "pulse", "hr",
    "temperature", "temp", "respiratory rate", "rr", "oxygen saturation",
    "spo2", "o2 sat", "weight", "height", "bmi", "body mass index", "blood sugar",
    "glucose", "blood glucose", "random blood sugar", "fasting blood sugar", "fbs",
    "postprandial", "ppbs",
]

def _disjoint(groups: List[Tuple[str, List[str]]]) -> Dict[str, Tuple[str, ...]]:
    taken = set()
    out: Dict[str, Tuple[str, ...]] = {}
    for category, terms in groups:
        kept = []
        for t in terms:
            key = t.lower().strip()
            if key in taken:
                continue
            taken.add(key)
            kept.append(key)
        out[category] = tuple(kept)
    return out

# category -> terms, in scan order
VOCABULARIES: Mapping[str, Tuple[str, ...]] = MappingProxyType(_disjoint([
    ("symptom", _SYMPTOM_TERMS),
    ("disease", _DISEASE_TERMS),
    ("medication", _MEDICATION_TERMS),
    ("test", _TEST_TERMS),
    ("vital", _VITAL_TERMS),
]))
