# health_companion/services/knowledge_base.py
"""
Static condition / medicine tables.

Built once at import and exposed as tuples and read-only mappings. Nothing in
the service writes to them.
"""
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from health_companion.schemas.models import (
    ConditionInfo,
    ConditionRecord,
    MedicineRecord,
    DEFAULT_MEDICINE_CATEGORY,
    DEFAULT_MEDICINE_PRICE,
)

_CONDITION_ROWS = [
    ("Common Cold",
     ["runny nose", "sneezing", "cough", "sore throat", "fatigue", "mild fever"],
     ["Paracetamol", "Cetirizine", "Dextromethorphan", "Phenylephrine"]),
    ("Influenza",
     ["high fever", "body aches", "fatigue", "cough", "headache", "chills"],
     ["Oseltamivir", "Paracetamol", "Ibuprofen"]),
    ("Migraine",
     ["severe headache", "nausea", "sensitivity to light", "vomiting", "visual disturbances"],
     ["Sumatriptan", "Ibuprofen", "Paracetamol", "Naproxen"]),
    ("Hypertension",
     ["headache", "dizziness", "blurred vision", "chest pain", "shortness of breath"],
     ["Amlodipine", "Losartan", "Metoprolol", "Enalapril"]),
    ("Diabetes Type 2",
     ["increased thirst", "frequent urination", "fatigue", "blurred vision", "slow healing"],
     ["Metformin", "Glipizide", "Insulin", "Sitagliptin"]),
    ("Asthma",
     ["shortness of breath", "wheezing", "chest tightness", "cough", "difficulty breathing"],
     ["Salbutamol", "Budesonide", "Montelukast", "Theophylline"]),
    ("Gastritis",
     ["stomach pain", "nausea", "vomiting", "bloating", "indigestion", "loss of appetite"],
     ["Omeprazole", "Ranitidine", "Antacids", "Sucralfate"]),
    ("Anxiety Disorder",
     ["excessive worry", "restlessness", "fatigue", "difficulty concentrating", "muscle tension"],
     ["Sertraline", "Alprazolam", "Buspirone", "Escitalopram"]),
    ("Allergic Rhinitis",
     ["sneezing", "runny nose", "itchy eyes", "nasal congestion", "postnasal drip"],
     ["Cetirizine", "Loratadine", "Fluticasone", "Montelukast"]),
    ("Urinary Tract Infection",
     ["painful urination", "frequent urination", "lower abdominal pain", "cloudy urine", "fever"],
     ["Ciprofloxacin", "Nitrofurantoin", "Trimethoprim", "Amoxicillin"]),
]

CONDITIONS: Tuple[ConditionRecord, ...] = tuple(
    ConditionRecord(name=name, symptoms=tuple(symptoms), medicines=tuple(medicines))
    for name, symptoms, medicines in _CONDITION_ROWS
)

ALL_SYMPTOMS: Tuple[str, ...] = tuple(sorted({s for c in CONDITIONS for s in c.symptoms}))

_INFO_ROWS = {
    "Common Cold": (
        "A viral infection of the upper respiratory tract causing mild symptoms.",
        ["Warm fluids", "Vitamin C rich foods", "Ginger tea", "Honey", "Chicken soup"],
        ["Get plenty of rest", "Stay hydrated", "Avoid close contact with others", "Wash hands frequently"],
    ),
    "Influenza": (
        "A contagious respiratory illness caused by influenza viruses.",
        ["Clear broths", "Herbal teas", "Fresh fruits", "Yogurt", "Lean proteins"],
        ["Stay home and rest", "Cover coughs and sneezes", "Avoid crowds", "Get vaccinated annually"],
    ),
    "Migraine": (
        "A neurological condition characterized by intense, debilitating headaches.",
        ["Magnesium-rich foods", "Omega-3 fatty acids", "Fresh vegetables", "Whole grains", "Water"],
        ["Identify triggers", "Maintain sleep schedule", "Reduce stress", "Avoid bright lights"],
    ),
    "Hypertension": (
        "High blood pressure that can lead to serious cardiovascular complications.",
        ["Low sodium foods", "Fresh fruits", "Vegetables", "Whole grains", "Lean proteins"],
        ["Monitor blood pressure regularly", "Exercise regularly", "Limit alcohol", "Reduce stress"],
    ),
    "Diabetes Type 2": (
        "A chronic condition affecting how the body processes blood sugar.",
        ["Whole grains", "Leafy vegetables", "Lean proteins", "Low glycemic foods", "Healthy fats"],
        ["Monitor blood sugar", "Exercise regularly", "Take medications as prescribed", "Regular checkups"],
    ),
    "Asthma": (
        "A chronic respiratory condition causing airway inflammation and breathing difficulty.",
        ["Anti-inflammatory foods", "Omega-3 rich fish", "Fresh fruits", "Vegetables", "Adequate water"],
        ["Avoid triggers", "Use inhaler as prescribed", "Monitor symptoms", "Get flu vaccine"],
    ),
    "Gastritis": (
        "Inflammation of the stomach lining causing digestive discomfort.",
        ["Bland foods", "Lean proteins", "Non-acidic fruits", "Cooked vegetables", "Whole grains"],
        ["Avoid spicy foods", "Eat smaller meals", "Avoid alcohol", "Manage stress"],
    ),
    "Anxiety Disorder": (
        "A mental health condition characterized by excessive worry and fear.",
        ["Complex carbohydrates", "Omega-3 fatty acids", "Probiotics", "Herbal teas", "Magnesium-rich foods"],
        ["Practice relaxation techniques", "Regular exercise", "Adequate sleep", "Seek therapy"],
    ),
    "Allergic Rhinitis": (
        "An allergic response causing nasal inflammation and related symptoms.",
        ["Anti-inflammatory foods", "Vitamin C rich foods", "Local honey", "Probiotics", "Omega-3 fatty acids"],
        ["Avoid allergens", "Keep windows closed", "Use air purifiers", "Shower after outdoor activities"],
    ),
    "Urinary Tract Infection": (
        "A bacterial infection affecting the urinary system.",
        ["Cranberry juice", "Water", "Probiotics", "Vitamin C rich foods", "Avoid caffeine"],
        ["Stay hydrated", "Urinate frequently", "Wipe front to back", "Avoid irritating products"],
    ),
}

CONDITION_INFO: Mapping[str, ConditionInfo] = MappingProxyType({
    name: ConditionInfo(name=name, description=desc, diet=tuple(diet), precautions=tuple(prec))
    for name, (desc, diet, prec) in _INFO_ROWS.items()
})

# Interaction partners, in the order they are reported.
_INTERACTIONS: Dict[str, List[str]] = {
    "Warfarin": ["Aspirin", "Ibuprofen", "Naproxen"],
    "Aspirin": ["Warfarin", "Ibuprofen"],
    "Metformin": ["Alcohol"],
    "Insulin": ["Beta blockers", "Corticosteroids"],
    "Sertraline": ["Alprazolam", "MAO inhibitors"],
    "Alprazolam": ["Opioids", "Alcohol", "Sertraline"],
    "Amlodipine": ["Grapefruit"],
    "Simvastatin": ["Grapefruit", "Erythromycin"],
    "Ciprofloxacin": ["Antacids", "Dairy products"],
    "Omeprazole": ["Clopidogrel"],
}

_PRICES: Dict[str, float] = {
    "Paracetamol": 2.50, "Ibuprofen": 3.00, "Cetirizine": 4.50, "Loratadine": 5.00,
    "Omeprazole": 6.50, "Ranitidine": 5.50, "Metformin": 8.00, "Glipizide": 12.00,
    "Insulin": 25.00, "Amlodipine": 7.00, "Losartan": 9.00, "Metoprolol": 8.50,
    "Enalapril": 7.50, "Sertraline": 15.00, "Alprazolam": 10.00, "Buspirone": 12.50,
    "Escitalopram": 16.00, "Salbutamol": 8.00, "Budesonide": 18.00, "Montelukast": 14.00,
    "Sumatriptan": 22.00, "Naproxen": 4.50, "Oseltamivir": 35.00, "Ciprofloxacin": 11.00,
    "Nitrofurantoin": 13.00, "Trimethoprim": 9.50, "Amoxicillin": 7.00, "Fluticasone": 16.50,
    "Dextromethorphan": 5.50, "Phenylephrine": 4.00, "Sitagliptin": 28.00,
    "Theophylline": 10.50, "Antacids": 3.50, "Sucralfate": 11.50,
}

_CATEGORIES: Dict[str, str] = {
    "Paracetamol": "Pain Relief",
    "Ibuprofen": "Anti-inflammatory",
    "Cetirizine": "Antihistamine",
    "Loratadine": "Antihistamine",
    "Omeprazole": "Proton Pump Inhibitor",
    "Ranitidine": "H2 Blocker",
    "Metformin": "Antidiabetic",
    "Insulin": "Antidiabetic",
    "Amlodipine": "Antihypertensive",
    "Sertraline": "Antidepressant",
    "Salbutamol": "Bronchodilator",
    "Sumatriptan": "Antimigraine",
    "Ciprofloxacin": "Antibiotic",
}

def _build_medicines() -> Dict[str, MedicineRecord]:
    names = list(dict.fromkeys([*_PRICES, *_INTERACTIONS, *_CATEGORIES]))
    return {
        n.lower(): MedicineRecord(
            name=n,
            category=_CATEGORIES.get(n, DEFAULT_MEDICINE_CATEGORY),
            price=_PRICES.get(n, DEFAULT_MEDICINE_PRICE),
            interactions=tuple(_INTERACTIONS.get(n, [])),
        )
        for n in names
    }

# keyed by lower-cased name
MEDICINES: Mapping[str, MedicineRecord] = MappingProxyType(_build_medicines())

def find_medicine(name: str) -> Optional[MedicineRecord]:
    return MEDICINES.get((name or "").strip().lower())

def get_condition_info(name: str) -> Optional[ConditionInfo]:
    key = (name or "").strip().lower()
    return next((info for n, info in CONDITION_INFO.items() if n.lower() == key), None)

def list_symptoms() -> List[str]:
    return list(ALL_SYMPTOMS)
