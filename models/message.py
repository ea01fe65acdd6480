import datetime
from typing import Literal

from models.base import CamelModel

Role = Literal["user", "assistant"]


class Message(CamelModel):
    id: int
    content: str
    role: Role
    created_at: datetime.datetime
