from dotenv import load_dotenv

load_dotenv(".env")

import os
import pathlib
import sys

import pytest
from fastapi.testclient import TestClient

# Ensure project root on sys.path for application imports
PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.pop("DEBUG", None)

MIGRAINE_RESPONSE = '{"possibleConditions":[{"condition":"Migraine","probability":70,"description":"d","recommendation":"r","severity":"medium"}],"recommendations":[],"emergencyWarnings":[]}'


class StubInference:
    """Stands in for the model provider; records every call."""

    def __init__(self, reply=MIGRAINE_RESPONSE, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def complete(self, system, turns):
        self.calls.append({"system": system, "turns": list(turns)})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def assessment_payload():
    """Sample intake form submission"""
    return {
        "primarySymptoms": "severe headache and nausea for 2 days",
        "additionalSymptoms": ["Nausea"],
        "duration": "1-3-days",
        "severity": 7,
        "age": 34,
        "gender": "female",
    }


@pytest.fixture
def store():
    from database.storage import MemoryStore

    return MemoryStore()


@pytest.fixture
def inference():
    return StubInference()


@pytest.fixture
def coordinator(store, inference):
    from controllers.assessment import AssessmentCoordinator

    return AssessmentCoordinator(store=store, inference=inference)


@pytest.fixture
def app(store, inference):
    from main import create_app

    return create_app(store=store, inference=inference)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
