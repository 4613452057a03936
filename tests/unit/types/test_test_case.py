"""
Unit tests for the case and result models.
"""

import pytest
from pydantic import ValidationError

from translitqa.core.verdict import Verdict
from translitqa.types.test_case import Category, ResultRecord, Status, TestCase


class TestTestCase:

    def test_defaults(self):
        case = TestCase(case_id="Pos_0001")
        assert case.description == ""
        assert case.expected_output == ""
        assert case.category is Category.POSITIVE

    def test_empty_case_id_rejected(self):
        with pytest.raises(ValidationError):
            TestCase(case_id="")
        with pytest.raises(ValidationError):
            TestCase(case_id="   ")

    def test_is_immutable(self):
        case = TestCase(case_id="Pos_0001", input="mama")
        with pytest.raises(ValidationError):
            case.input = "oya"

    def test_title(self):
        case = TestCase(case_id="Pos_0001", description="Simple sentence")
        assert case.title == "Pos_0001: Simple sentence"

    def test_category_accepts_value(self):
        assert TestCase(case_id="x", category="UI").category is Category.UI


class TestResultRecord:

    def test_from_case(self):
        case = TestCase(
            case_id="Neg_0001",
            description="Mixed words",
            input="mama office yanavaa",
            expected_output="මම office යනවා",
            category=Category.NEGATIVE,
        )

        record = ResultRecord.from_case(
            case, "මම ඔෆිස් යනවා", Verdict(Status.FAIL, "Output differs from expected")
        )

        assert record.case_id == "Neg_0001"
        assert record.description == "Mixed words"
        assert record.input == "mama office yanavaa"
        assert record.expected_output == "මම office යනවා"
        assert record.actual_output == "මම ඔෆිස් යනවා"
        assert record.status is Status.FAIL
        assert record.remark == "Output differs from expected"
        assert not record.passed

    def test_is_immutable(self):
        record = ResultRecord(
            case_id="a", description="", input="", expected_output="", status=Status.PASS
        )
        assert record.passed
        with pytest.raises(ValidationError):
            record.status = Status.FAIL
