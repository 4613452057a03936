"""
Case classification and the transform that turns parsed records into cases.
"""

import logging
import time
from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, List, Mapping, Optional

from pydantic import ValidationError

from translitqa.core.components.common import ComponentResult
from translitqa.core.components.transform.base import Transform
from translitqa.types.test_case import Category, TestCase

logger = logging.getLogger(__name__)


class CaseClassifier(ABC):
    """Maps a case identifier to the category that decides how it runs."""

    @abstractmethod
    def classify(self, case_id: str) -> Category:
        pass


class NamingConventionClassifier(CaseClassifier):
    """
    Classifies by identifier prefix/substring.

    The ``Neg`` prefix is checked first, so ``Neg_UI_003`` is Negative while
    ``Pos_UI_0002`` and ``Something_UI_x`` are UI.
    """

    def classify(self, case_id: str) -> Category:
        if case_id.startswith("Neg"):
            return Category.NEGATIVE
        if case_id.startswith("Pos_UI") or "UI" in case_id:
            return Category.UI
        return Category.POSITIVE


class MappingClassifier(CaseClassifier):
    """Explicit id -> category table with a fallback for unknown ids."""

    def __init__(
        self,
        mapping: Mapping[str, Category],
        fallback: Optional[CaseClassifier] = None,
    ):
        self.mapping = {case_id: Category(value) for case_id, value in mapping.items()}
        self.fallback = fallback or NamingConventionClassifier()

    def classify(self, case_id: str) -> Category:
        if case_id in self.mapping:
            return self.mapping[case_id]
        return self.fallback.classify(case_id)


class CaseBuilderTransform(Transform):
    """Transform that builds classified TestCases from parsed records."""

    def __init__(
        self,
        classifier: Optional[CaseClassifier] = None,
        name: str = "case_builder",
        config: dict = None,
    ):
        super().__init__(name, config)
        self.classifier = classifier or NamingConventionClassifier()

    def validate_input(self, input_data) -> List[str]:
        if not isinstance(input_data, list):
            return ["Input must be a list of records"]
        if not all(isinstance(record, list) for record in input_data):
            return ["All records must be lists of fields"]
        return []

    def transform(self, data: List[List[str]]) -> ComponentResult:
        start_time = time.time()

        cases = []
        warnings = []
        seen_ids: Dict[str, int] = {}

        for index, record in enumerate(data):
            case_id, description, case_input, expected = record[:4]
            try:
                case = TestCase(
                    case_id=case_id,
                    description=description,
                    input=case_input,
                    expected_output=expected,
                    category=self.classifier.classify(case_id),
                )
            except ValidationError:
                logger.debug(f"Dropping record {index}: empty case id")
                continue

            if case_id in seen_ids:
                warnings.append(
                    f"Duplicate case id {case_id} (records {seen_ids[case_id]} and {index})"
                )
            seen_ids.setdefault(case_id, index)
            cases.append(case)

        counts = Counter(case.category.value for case in cases)

        return ComponentResult(
            data=cases,
            metadata={
                "input_records": len(data),
                "cases_built": len(cases),
                "category_counts": dict(counts),
            },
            warnings=warnings,
            execution_time_ms=(time.time() - start_time) * 1000,
        )
