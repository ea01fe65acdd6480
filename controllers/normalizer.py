import json
from typing import Any, Optional

from core.exceptions import MalformedUpstreamContent
from models.assessment import DiagnosticResult, StructuredResult
from utils.state import State

FALLBACK_RESULT = StructuredResult(
    possible_conditions=[
        DiagnosticResult(
            condition="Analysis Available",
            probability=50,
            description="The AI provided analysis but in an unexpected format. Please consult a healthcare professional for proper evaluation.",
            recommendation="Seek professional medical advice",
            severity="medium",
        )
    ],
    recommendations=[
        "Consult with a healthcare professional",
        "Monitor symptoms closely",
        "Seek immediate care if symptoms worsen",
    ],
    emergency_warnings=[
        "Seek immediate medical attention if you experience severe symptoms",
        "Call emergency services for life-threatening conditions",
    ],
)


def fallback_result() -> dict[str, Any]:
    return FALLBACK_RESULT.model_dump(by_alias=True)


def extract_result(raw_text: str) -> dict[str, Any]:
    """
    Parse the span from the first "{" to the last "}" of the model output.

    Raises:
        MalformedUpstreamContent: no braces, invalid JSON, or the object
            has no "possibleConditions" key.
    """
    start = raw_text.find("{")
    end = raw_text.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise MalformedUpstreamContent("No JSON object found in model output")
    try:
        parsed = json.loads(raw_text[start : end + 1])
    except (ValueError, RecursionError) as e:
        raise MalformedUpstreamContent(f"Invalid JSON in model output: {e}") from e
    if not isinstance(parsed, dict) or "possibleConditions" not in parsed:
        raise MalformedUpstreamContent("Model output has no possibleConditions")
    return parsed


def normalize_response(raw_text: Optional[str]) -> dict[str, Any]:
    """
    Turn raw model output into a structured result. Never raises.

    The extracted object is returned as-is; nested fields are not checked.
    Anything unusable yields a fresh copy of the fallback result.
    """
    try:
        return extract_result(raw_text or "")
    except MalformedUpstreamContent as e:
        State.logger.warning(f"Using fallback diagnosis: {str(e)}")
        return fallback_result()
