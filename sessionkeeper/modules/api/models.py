"""
Sessionkeeper shared data models.

A session record has two protected, strongly typed fields (id and creation
time) and an open payload owned by the application. The stored form is a
flat JSON object so payload keys sit next to sessionId/sessionDate.
"""

import json
from typing import Any, ClassVar, Dict, FrozenSet, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class SessionRecord(BaseModel):
    """Persisted unit of session state."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Keys a caller-supplied delta may never touch
    PROTECTED_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"sessionId", "sessionDate", "ttl"})

    session_id: str = Field(..., alias="sessionId", description="Unique session identifier")
    session_date: int = Field(
        ..., alias="sessionDate", ge=0, description="Creation time in epoch milliseconds"
    )
    data: Dict[str, Any] = Field(default_factory=dict, description="Application payload")

    @classmethod
    def empty(cls) -> "SessionRecord":
        """Default record returned when a failed read is suppressed."""
        return cls(session_id="", session_date=0)

    @property
    def is_empty(self) -> bool:
        return not self.session_id

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __contains__(self, key: str) -> bool:
        return key in self.data

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self.data.get(key, default)

    def merged(self, delta: Mapping[str, Any]) -> "SessionRecord":
        """Return a copy with delta shallow-merged over the payload (delta wins)."""
        return self.model_copy(update={"data": {**self.data, **delta}})

    def to_dict(self) -> Dict[str, Any]:
        """Flat representation: protected fields plus payload keys."""
        return {**self.data, "sessionId": self.session_id, "sessionDate": self.session_date}

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, raw: str) -> "SessionRecord":
        """
        Decode the stored form.

        Raises:
            ValueError: If the value is not a JSON object or lacks the
                protected fields (pydantic ValidationError is a ValueError)
        """
        payload = json.loads(raw)
        if not isinstance(payload, dict):
            raise ValueError("Stored session is not a JSON object")

        session_id = payload.pop("sessionId", None)
        session_date = payload.pop("sessionDate", None)
        return cls(session_id=session_id, session_date=session_date, data=payload)
