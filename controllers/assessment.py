from typing import Any, List

import pydantic

from controllers.inference import (
    ASSESSMENT_SYSTEM_PROMPT,
    InferenceClient,
    build_assessment_prompt,
)
from controllers.normalizer import normalize_response
from core.exceptions import NotFoundError, ValidationError
from database.storage import BaseStore
from models.assessment import Assessment
from schema.assessment import AssessmentCreate
from utils.state import State


def validation_error_from(e: pydantic.ValidationError) -> ValidationError:
    """Name the first failing field of a pydantic error."""
    first = e.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or "body"
    return ValidationError(field=field, message=f"Invalid {field}: {first['msg']}")


class AssessmentCoordinator:
    """
    Runs the create -> analyse -> merge flow for assessments.

    Input fields are only ever written by ``submit``; ``request_analysis``
    touches nothing but the stored result. Repeated analysis overwrites the
    previous result.
    """

    def __init__(self, store: BaseStore, inference: InferenceClient):
        self.store = store
        self.inference = inference

    def submit(self, payload: Any) -> Assessment:
        try:
            data = AssessmentCreate.model_validate(payload)
        except pydantic.ValidationError as e:
            error = validation_error_from(e)
            State.logger.error(f"Invalid assessment data: {error.message}")
            raise error from e
        assessment = self.store.create_assessment(data)
        State.logger.info(f"Assessment {assessment.id} created")
        return assessment

    def get(self, assessment_id: int) -> Assessment:
        assessment = self.store.get_assessment(assessment_id)
        if assessment is None:
            State.logger.error(f"Assessment with ID {assessment_id} not found")
            raise NotFoundError("Assessment not found")
        return assessment

    def list(self) -> List[Assessment]:
        return list(self.store.list_assessments())

    def request_analysis(self, assessment_id: int) -> Assessment:
        assessment = self.get(assessment_id)
        if assessment.ai_response is not None:
            State.logger.info(
                f"Assessment {assessment_id} already analysed; overwriting result"
            )

        prompt = build_assessment_prompt(assessment)
        raw = self.inference.complete(
            ASSESSMENT_SYSTEM_PROMPT, [{"role": "user", "content": prompt}]
        )
        result = normalize_response(raw)

        updated = self.store.update_assessment_result(assessment_id, result)
        if updated is None:
            raise NotFoundError("Assessment not found")
        State.logger.info(f"Assessment {assessment_id} analysed")
        return updated
