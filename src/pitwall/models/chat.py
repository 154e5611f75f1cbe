"""Chat transcript model."""

from __future__ import annotations

from typing import Literal

from pitwall.models._base import WireModel


class ChatMessage(WireModel):
    role: Literal["user", "model"]
    content: str
