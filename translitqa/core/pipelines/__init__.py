from translitqa.core.pipelines.base import Pipeline, PipelineResult
from translitqa.core.pipelines.case_loading import (
    CaseLoadError,
    create_case_loading_pipeline,
    load_test_cases,
)

__all__ = [
    "Pipeline",
    "PipelineResult",
    "CaseLoadError",
    "create_case_loading_pipeline",
    "load_test_cases",
]
