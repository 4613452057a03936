"""
Factory for the pipeline that turns the case table into TestCases.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from translitqa.core.components.readers.tabular import CaseTableReader
from translitqa.core.components.transform.classifier import (
    CaseBuilderTransform,
    CaseClassifier,
)
from translitqa.core.pipelines.base import Pipeline
from translitqa.types.test_case import TestCase

logger = logging.getLogger(__name__)


class CaseLoadError(RuntimeError):
    """The case table could not be read or turned into cases."""

    def __init__(self, source: str, errors: List[str]):
        self.source = source
        self.errors = errors
        super().__init__(f"Failed to load cases from {source}: {'; '.join(errors)}")


def create_case_loading_pipeline(classifier: Optional[CaseClassifier] = None) -> Pipeline:
    return Pipeline(
        name="case_loading",
        components=[
            CaseTableReader(),
            CaseBuilderTransform(classifier=classifier),
        ],
    )


def load_test_cases(
    path: Union[str, Path], classifier: Optional[CaseClassifier] = None
) -> List[TestCase]:
    """
    Load and classify every case in the table at ``path``.

    Raises:
        CaseLoadError: if the table is missing or unreadable
    """
    result = create_case_loading_pipeline(classifier).run(str(path))
    if not result.success:
        raise CaseLoadError(str(path), result.errors)

    for warning in result.warnings:
        logger.warning(warning)

    logger.info(
        f"Loaded {len(result.data)} cases from {path} "
        f"({result.metadata.get('records_dropped', 0)} rows dropped): "
        f"{result.metadata.get('category_counts', {})}"
    )
    return result.data
