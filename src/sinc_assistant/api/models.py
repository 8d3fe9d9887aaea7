from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain import ConversationMessage


class HistoryItemPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(default="")
    content: str = Field(default="")
    event_data: Optional[Dict[str, Any]] = Field(default=None, alias="eventData")

    def to_domain(self) -> ConversationMessage:
        return ConversationMessage.from_dict(self.model_dump(by_alias=True))


class ProcessRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    conversation_history: List[HistoryItemPayload] = Field(default_factory=list, alias="conversationHistory")

    @field_validator("text")
    @classmethod
    def _text_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Text is required")
        return value

    def history(self) -> List[ConversationMessage]:
        return [item.to_domain() for item in self.conversation_history]


class ApiCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)
