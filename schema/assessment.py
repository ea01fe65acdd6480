from typing import List, Optional

from pydantic import Field

from models.base import CamelModel

DURATION_OPTIONS = {
    "less-than-24h": "Less than 24 hours",
    "1-3-days": "1-3 days",
    "4-7-days": "4-7 days",
    "1-2-weeks": "1-2 weeks",
    "more-than-2-weeks": "More than 2 weeks",
}

GENDER_OPTIONS = {
    "male": "Male",
    "female": "Female",
    "other": "Other",
    "prefer-not-to-say": "Prefer not to say",
}

COMMON_SYMPTOMS = [
    "Fever",
    "Headache",
    "Nausea",
    "Fatigue",
    "Dizziness",
    "Chest Pain",
    "Shortness of breath",
    "Cough",
    "Sore throat",
    "Muscle aches",
    "Joint pain",
    "Vomiting",
]


class AssessmentCreate(CamelModel):
    primary_symptoms: str = Field(..., min_length=10)
    additional_symptoms: List[str] = []
    # Option labels are not enforced; stored as free text.
    duration: str
    severity: int = Field(..., ge=1, le=10, strict=True)
    medical_history: Optional[str] = None
    age: int = Field(..., ge=1, le=120, strict=True)
    gender: str
