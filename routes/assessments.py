from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool

from controllers.assessment import AssessmentCoordinator
from core.exceptions import AppError
from models.assessment import Assessment
from routes.dependencies import get_coordinator, parse_id
from schema.assessment import COMMON_SYMPTOMS, DURATION_OPTIONS, GENDER_OPTIONS
from utils.state import State

router = APIRouter()


@router.get("/options")
async def get_options():
    return {
        "durations": [{"value": k, "label": v} for k, v in DURATION_OPTIONS.items()],
        "genders": [{"value": k, "label": v} for k, v in GENDER_OPTIONS.items()],
        "commonSymptoms": COMMON_SYMPTOMS,
    }


@router.post("/assessments", response_model=Assessment)
async def create_assessment(
    payload: Any = Body(None),
    coordinator: AssessmentCoordinator = Depends(get_coordinator),
):
    try:
        return coordinator.submit(payload)
    except AppError:
        raise
    except Exception as e:
        State.logger.error(f"An error occured while creating assessment: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to create assessment")


@router.post("/assessments/{assessment_id}/diagnose", response_model=Assessment)
async def diagnose_assessment(
    assessment_id: str,
    coordinator: AssessmentCoordinator = Depends(get_coordinator),
):
    try:
        # The model call blocks; keep it off the event loop.
        return await run_in_threadpool(
            coordinator.request_analysis, parse_id(assessment_id)
        )
    except AppError:
        raise
    except Exception as e:
        State.logger.error(f"Diagnosis error: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to process diagnosis")


@router.get("/assessments", response_model=List[Assessment])
async def get_assessments(
    coordinator: AssessmentCoordinator = Depends(get_coordinator),
):
    try:
        return coordinator.list()
    except Exception as e:
        State.logger.error(f"An error occured while fetching assessments: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch assessments")


@router.get("/assessments/{assessment_id}", response_model=Assessment)
async def get_assessment(
    assessment_id: str,
    coordinator: AssessmentCoordinator = Depends(get_coordinator),
):
    try:
        return coordinator.get(parse_id(assessment_id))
    except AppError:
        raise
    except Exception as e:
        State.logger.error(f"An error occured while fetching assessment: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch assessment")
