"""
Base writer interface for components that write data to external destinations.
"""

from abc import abstractmethod
from typing import Any

from translitqa.core.components.common import Component, ComponentResult


class Writer(Component):
    """Base class for components that write data to external destinations."""

    @abstractmethod
    def write(self, data: Any) -> ComponentResult:
        """Write data to the component's destination."""
        pass

    def process(self, input_data: Any) -> ComponentResult:
        """Process by writing the input data."""
        return self.write(input_data)
