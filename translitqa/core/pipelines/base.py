"""
Base pipeline classes for orchestrating component execution.
"""

import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from translitqa.core.components.common import Component, ComponentResult


@dataclass
class PipelineResult:
    """Result from pipeline execution."""
    success: bool
    data: Any
    metadata: Dict[str, Any] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    stage_results: List[ComponentResult] = field(default_factory=list)
    execution_time_ms: float = 0.0
    timestamp: datetime = field(default_factory=datetime.now)

    def add_error(self, error: str) -> None:
        """Add an error message."""
        self.errors.append(error)
        self.success = False

    def add_warning(self, warning: str) -> None:
        """Add a warning message."""
        self.warnings.append(warning)


class Pipeline:
    """
    A pipeline that executes a sequence of components.

    Data flows from each component to the next; execution stops at the first
    stage that fails input validation or reports errors.
    """

    def __init__(self, name: str, components: List[Component]):
        self.name = name
        self.components = components

    def run(self, initial_data: Any) -> PipelineResult:
        start_time = time.time()

        if not self.components:
            return PipelineResult(
                success=False,
                data=None,
                errors=["Pipeline has no components"],
            )

        result = PipelineResult(success=True, data=initial_data)
        current_data = initial_data

        for i, component in enumerate(self.components):
            input_errors = component.validate_input(current_data)
            if input_errors:
                for error in input_errors:
                    result.add_error(f"Stage {i} ({component.name}) input validation: {error}")
                break

            component_result = component.process(current_data)
            result.stage_results.append(component_result)

            if not component_result.success:
                for error in component_result.errors:
                    result.add_error(f"Stage {i} ({component.name}): {error}")
                break

            for warning in component_result.warnings:
                result.add_warning(f"Stage {i} ({component.name}): {warning}")

            current_data = component_result.data

        result.data = current_data if result.success else None
        result.execution_time_ms = (time.time() - start_time) * 1000
        result.metadata.update({
            "pipeline_name": self.name,
            "stages_completed": len(result.stage_results),
            "total_stages": len(self.components),
        })
        for stage_result in result.stage_results:
            result.metadata.update(stage_result.metadata)

        return result

    def __str__(self) -> str:
        stage_names = [c.name for c in self.components]
        return f"Pipeline('{self.name}': {' -> '.join(stage_names)})"

    def __repr__(self) -> str:
        return f"Pipeline(name='{self.name}', stages={len(self.components)})"
