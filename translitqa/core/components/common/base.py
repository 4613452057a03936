"""
Base component interface and result class for the case pipeline.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class ComponentResult:
    """Result from component execution."""
    data: Any
    metadata: Dict[str, Any] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    execution_time_ms: float = 0.0
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def success(self) -> bool:
        """True if no errors occurred."""
        return len(self.errors) == 0

    def add_error(self, error: str) -> None:
        """Add an error message."""
        self.errors.append(error)

    def add_warning(self, warning: str) -> None:
        """Add a warning message."""
        self.warnings.append(warning)


class Component(ABC):
    """
    Base class for all pipeline components.

    Each component takes input data, processes it, and returns a
    ComponentResult with the processed data and any metadata or errors.
    """

    def __init__(self, name: str, config: Optional[Dict[str, Any]] = None):
        self.name = name
        self.config = config or {}

    @abstractmethod
    def process(self, input_data: Any) -> ComponentResult:
        """
        Process input data and return result.

        Args:
            input_data: The data to process

        Returns:
            ComponentResult with processed data, metadata, and any errors
        """
        pass

    def validate_input(self, input_data: Any) -> List[str]:
        """Return a list of validation errors for ``input_data`` (empty if valid)."""
        return []

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', config={self.config})"
