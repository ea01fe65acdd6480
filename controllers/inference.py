from typing import List, Optional

from core.config import Settings, get_settings
from core.exceptions import UpstreamConfigError, UpstreamError
from core.load_model import load_model_via_api
from models.assessment import Assessment
from utils.state import State

ASSESSMENT_SYSTEM_PROMPT = "You are a medical AI assistant. Provide diagnostic suggestions for informational purposes only. Always emphasize that this is not a substitute for professional medical advice."

CHAT_SYSTEM_PROMPT = """You are a medical assistant answering questions about symptoms in a conversational setting.
Provide general information for educational purposes only and never a definitive diagnosis.
Always recommend consulting a healthcare professional, and advise seeking immediate care for severe or worsening symptoms.
If you are unsure of the answer, ask for clarification or say you don't know. Never make up an answer.
"""

ASSESSMENT_PROMPT_TEMPLATE = """You are a medical AI assistant providing diagnostic suggestions for informational purposes only.

Patient Information:
- Age: {age}
- Gender: {gender}
- Primary Symptoms: {primary_symptoms}
- Additional Symptoms: {additional_symptoms}
- Duration: {duration}
- Severity (1-10): {severity}
- Medical History: {medical_history}

Please provide a structured analysis in the following JSON format:
{{
  "possibleConditions": [
    {{
      "condition": "condition name",
      "probability": number (0-100),
      "description": "brief description",
      "recommendation": "brief recommendation",
      "severity": "low|medium|high"
    }}
  ],
  "recommendations": [
    "general care recommendations"
  ],
  "emergencyWarnings": [
    "when to seek immediate care"
  ]
}}

Focus on common conditions that match the symptoms. Always emphasize the need for professional medical consultation."""

MOCK_RESPONSE = "This is a mock response for debugging purposes. Please consult a healthcare professional."


def build_assessment_prompt(assessment: Assessment) -> str:
    return ASSESSMENT_PROMPT_TEMPLATE.format(
        age=assessment.age,
        gender=assessment.gender,
        primary_symptoms=assessment.primary_symptoms,
        additional_symptoms=", ".join(assessment.additional_symptoms) or "None",
        duration=assessment.duration,
        severity=assessment.severity,
        medical_history=assessment.medical_history or "None provided",
    )


class InferenceClient:
    """Sends a system instruction plus prior turns to the configured model."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def complete(self, system: str, turns: List[dict]) -> str:
        """
        Return the model's reply text.

        Args:
            system (str): System instruction.
            turns (List[dict]): Prior turns as {"role", "content"} dicts, oldest first.

        Raises:
            UpstreamConfigError: The provider's API key is not set.
            UpstreamError: The provider call failed.
        """
        settings = self.settings
        if settings.debug:
            return MOCK_RESPONSE
        if not settings.api_key:
            State.logger.error(f"{settings.model_provider} API key not configured")
            raise UpstreamConfigError(
                f"{settings.model_provider} API key not configured"
            )

        messages = [{"role": "system", "content": system}] + list(turns)
        try:
            model, _ = load_model_via_api(
                model_name=settings.model_name,
                api_key=settings.api_key,
                model_provider=settings.model_provider,
                timeout=settings.inference_timeout,
                referer=settings.referer,
            )
            response = model.invoke(messages)
        except Exception as e:
            State.logger.error(f"An error occured while calling the model: {str(e)}")
            raise UpstreamError("Failed to get AI response") from e
        content = response.content
        if isinstance(content, list):
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part)
                for part in content
            )
        return content
