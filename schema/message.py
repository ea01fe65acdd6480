from pydantic import Field

from models.base import CamelModel
from models.message import Role


class MessageCreate(CamelModel):
    content: str = Field(..., min_length=1)
    role: Role = "user"
