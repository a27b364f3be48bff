from abc import ABC, abstractmethod
from typing import Any

__all__ = ("JsonSerializable",)


class JsonSerializable(ABC):
    @abstractmethod
    def to_json(self) -> Any:
        """Override this to return a Json-friendly representation of the object."""
