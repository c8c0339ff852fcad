"""Tests for ingestion domain types."""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from metrics_kernel.domain.dtos import ValidationError

from metrics_ingestion.domain.types import (
    EXPECTED_HEADERS,
    IngestKind,
    IngestResult,
    KpiSample,
    RowValidation,
)


class TestIngestKind:
    def test_values(self):
        assert IngestKind("kpi") is IngestKind.KPI
        assert IngestKind("staff") is IngestKind.STAFF

    def test_unknown_value(self):
        with pytest.raises(ValueError):
            IngestKind("invalid")

    def test_headers_per_kind(self):
        assert EXPECTED_HEADERS[IngestKind.KPI] == ("week_date", "efficiency", "production_rate", "defects_ppm")
        assert EXPECTED_HEADERS[IngestKind.STAFF] == ("name", "position", "department", "status")


class TestRowValidation:
    def test_ok(self):
        sample = KpiSample(date(2024, 1, 1), 1.0, 2.0, 3.0)
        result = RowValidation.ok(sample)
        assert result.is_valid
        assert result.record is sample
        assert result.errors == ()

    def test_failed(self):
        error = ValidationError(code="INVALID_DATE", message="Invalid date", field="week_date")
        result = RowValidation.failed([error])
        assert not result.is_valid
        assert result.record is None
        assert result.errors == (error,)


class TestIngestResult:
    def test_rejected(self):
        result = IngestResult.rejected("CSV data is empty")
        assert result.success is False
        assert result.records_processed == 0
        assert result.errors == ("CSV data is empty",)

    def test_to_dict_uses_wire_names(self):
        result = IngestResult(success=False, records_processed=3, errors=("Row 2: x",))
        assert result.to_dict() == {
            "success": False,
            "recordsProcessed": 3,
            "errors": ["Row 2: x"],
        }

    def test_frozen(self):
        result = IngestResult(success=True, records_processed=1)
        with pytest.raises(FrozenInstanceError):
            result.success = False
