from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RemoteUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int = 0
    login: str = ""
    avatar_url: str = ""
    url: str = ""


class RemoteRepo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int = 0
    name: str = ""
    url: str = ""


class RemoteEvent(BaseModel):
    """An event as returned by the GitHub events API.

    The payload varies by event type. It is not validated here; the client
    fills ``raw_payload`` with the payload's JSON text exactly as received.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    type: str = ""
    public: bool = False
    actor: Optional[RemoteUser] = None
    repo: Optional[RemoteRepo] = None
    created_at: Optional[datetime] = None
    raw_payload: Optional[str] = None


class MinimalUser(BaseModel):
    login: str
    id: int
    avatar_url: str = ""
    profile_url: str = ""


class MinimalRepo(BaseModel):
    id: int
    name: str
    url: str = ""


class MinimalEvent(BaseModel):
    id: str
    type: str
    actor: MinimalUser
    repo: MinimalRepo
    created_at: str
    # raw JSON text, spliced into the output unchanged
    payload: Optional[str] = Field(default=None, exclude=True)

    def to_json(self) -> str:
        data = self.model_dump_json()
        if self.payload is None:
            return data
        return f'{data[:-1]},"payload":{self.payload}}}'


def dump_minimal_events(events: List[MinimalEvent]) -> str:
    return "[" + ",".join(event.to_json() for event in events) + "]"
