"""
Chat-completion backend used to phrase the final answer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol

import cohere


class ChatModel(Protocol):
    async def complete(self, prompt: str) -> str: ...


@dataclass
class CohereChat:
    """Sends a prompt as a single user turn to the Cohere v2 chat endpoint."""

    model: str
    api_key: Optional[str] = None
    client: Any = None

    def __post_init__(self) -> None:
        if self.client is None:
            if not self.api_key:
                raise RuntimeError("COHERE_API_KEY is not set")
            self.client = cohere.AsyncClientV2(api_key=self.api_key)

    async def complete(self, prompt: str) -> str:
        resp = await self.client.chat(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
        )
        content = resp.message.content or []
        if not content:
            raise ValueError(f"{self.model} returned an empty message")
        return content[0].text
