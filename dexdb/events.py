from abc import ABC, abstractmethod
from typing import Any


class EventDispatcherInterface(ABC):
    @abstractmethod
    def dispatch(self, event: str, payload: Any = None) -> None: ...


class NullEventDispatcher(EventDispatcherInterface):
    """Accepts lifecycle notifications and drops them."""

    def dispatch(self, event: str, payload: Any = None) -> None:
        return None
