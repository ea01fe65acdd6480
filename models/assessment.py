import datetime
from typing import Any, List, Literal, Optional

from models.base import CamelModel


class DiagnosticResult(CamelModel):
    condition: str
    probability: int
    description: str
    recommendation: str
    severity: Literal["low", "medium", "high"]


class StructuredResult(CamelModel):
    possible_conditions: List[DiagnosticResult]
    recommendations: List[str]
    emergency_warnings: List[str]


class Assessment(CamelModel):
    id: int
    primary_symptoms: str
    additional_symptoms: List[str] = []
    duration: str
    severity: int
    medical_history: Optional[str] = None
    age: int
    gender: str
    # Kept as the raw parsed object; nested fields are not coerced.
    ai_response: Optional[dict[str, Any]] = None
    created_at: datetime.datetime
