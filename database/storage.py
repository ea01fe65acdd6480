import copy
import datetime
import threading
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from fastapi import Request

from models.assessment import Assessment
from models.message import Message, Role
from schema.assessment import AssessmentCreate


class BaseStore(ABC):
    """Interface shared by every assessment/message backend."""

    @abstractmethod
    def create_assessment(self, data: AssessmentCreate) -> Assessment: ...

    @abstractmethod
    def get_assessment(self, assessment_id: int) -> Optional[Assessment]: ...

    @abstractmethod
    def update_assessment_result(
        self, assessment_id: int, result: dict
    ) -> Optional[Assessment]: ...

    @abstractmethod
    def list_assessments(self) -> Iterator[Assessment]: ...

    @abstractmethod
    def create_message(self, content: str, role: Role) -> Message: ...

    @abstractmethod
    def list_messages(self) -> Iterator[Message]: ...


def _now() -> datetime.datetime:
    return datetime.datetime.now(datetime.UTC)


class MemoryStore(BaseStore):
    """
    In-process store for assessments and chat messages.

    Ids come from two independent counters starting at 1. Every read and
    write holds the same lock, and callers only ever receive deep copies.
    Nothing survives a restart.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._assessments: dict[int, Assessment] = {}
        self._messages: dict[int, Message] = {}
        self._next_assessment_id = 1
        self._next_message_id = 1

    def create_assessment(self, data: AssessmentCreate) -> Assessment:
        with self._lock:
            assessment = Assessment(
                id=self._next_assessment_id,
                **data.model_dump(),
                ai_response=None,
                created_at=_now(),
            )
            self._assessments[assessment.id] = assessment
            self._next_assessment_id += 1
            return assessment.model_copy(deep=True)

    def get_assessment(self, assessment_id: int) -> Optional[Assessment]:
        with self._lock:
            assessment = self._assessments.get(assessment_id)
            return assessment.model_copy(deep=True) if assessment else None

    def update_assessment_result(
        self, assessment_id: int, result: dict
    ) -> Optional[Assessment]:
        with self._lock:
            assessment = self._assessments.get(assessment_id)
            if assessment is None:
                return None
            updated = assessment.model_copy(
                update={"ai_response": copy.deepcopy(result)}, deep=True
            )
            self._assessments[assessment_id] = updated
            return updated.model_copy(deep=True)

    def list_assessments(self) -> Iterator[Assessment]:
        with self._lock:
            snapshot = sorted(
                self._assessments.values(),
                key=lambda a: (a.created_at, a.id),
                reverse=True,
            )
            snapshot = [a.model_copy(deep=True) for a in snapshot]
        yield from snapshot

    def create_message(self, content: str, role: Role) -> Message:
        with self._lock:
            message = Message(
                id=self._next_message_id,
                content=content,
                role=role,
                created_at=_now(),
            )
            self._messages[message.id] = message
            self._next_message_id += 1
            return message.model_copy(deep=True)

    def list_messages(self) -> Iterator[Message]:
        with self._lock:
            snapshot = [
                m.model_copy(deep=True)
                for m in sorted(
                    self._messages.values(), key=lambda m: (m.created_at, m.id)
                )
            ]
        yield from snapshot


def get_store(request: Request) -> BaseStore:
    return request.app.state.store
