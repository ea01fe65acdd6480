from fastapi import Depends, Request

from controllers.assessment import AssessmentCoordinator
from controllers.inference import InferenceClient
from core.exceptions import NotFoundError
from database.storage import BaseStore, get_store


def get_inference(request: Request) -> InferenceClient:
    return request.app.state.inference


def get_coordinator(
    store: BaseStore = Depends(get_store),
    inference: InferenceClient = Depends(get_inference),
) -> AssessmentCoordinator:
    return AssessmentCoordinator(store=store, inference=inference)


def parse_id(raw_id: str) -> int:
    """Ids that are not integers can never match a stored record."""
    try:
        return int(raw_id)
    except ValueError:
        raise NotFoundError("Assessment not found")
