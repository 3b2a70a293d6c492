"""Base class for validation rules."""

import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable


class ValidationRule(ABC):
    """A named check run against a field value before a document is persisted."""

    @abstractmethod
    async def evaluate(self, value: Any, document: Any) -> bool:
        """Check a field value.

        Args:
            value: Current value of the field, ``MISSING`` if absent
            document: Document the value belongs to

        Returns:
            True if the value is acceptable
        """
        pass


class FunctionRule(ValidationRule):
    """Adapts a plain ``(value, document) -> bool`` callable, sync or async."""

    def __init__(self, function: Callable[[Any, Any], Any]) -> None:
        if not callable(function):
            raise TypeError(f"Validation rule must be callable, got {type(function).__name__}")
        self.function = function

    async def evaluate(self, value: Any, document: Any) -> bool:
        result = self.function(value, document)
        if inspect.isawaitable(result):
            result = await result
        return bool(result)

    def __repr__(self) -> str:
        return f"FunctionRule({getattr(self.function, '__name__', self.function)!r})"
