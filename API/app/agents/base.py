from abc import ABC, abstractmethod
from typing import Any


class BaseAgent(ABC):
    """An agent takes a JSON-like payload and returns one; transport-agnostic."""

    name: str = "agent"

    @abstractmethod
    async def run(self, input_data: dict[str, Any]) -> dict[str, Any]:
        raise NotImplementedError
