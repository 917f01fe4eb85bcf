"""Unit tests for item models and the error taxonomy."""

import asyncio
import concurrent.futures

import pytest
from pydantic import ValidationError

from items_api.core.batch import ProcessingResult, UnitOutcome, UnitStatus
from items_api.core.errors import (
    BatchProcessingError,
    FailureKind,
    PersistenceError,
    UnitFailure,
    classify_failure,
)
from items_api.infrastructure.database.models import Item
from items_api.models import ItemRequest


class TestItemRequest:
    """Test request validation rules."""

    @pytest.mark.parametrize("email", ["test@email.com", "a.b+c_d-e@x", None])
    def test_valid_emails(self, email):
        """Test emails matching local@domain (or no email) are accepted."""
        assert ItemRequest(name="Item", email=email).email == email

    @pytest.mark.parametrize("email", ["no-at-sign", "@domain.com", "sp ace@x.com"])
    def test_invalid_emails(self, email):
        """Test malformed emails are rejected."""
        with pytest.raises(ValidationError):
            ItemRequest(name="Item", email=email)

    def test_empty_name_rejected(self):
        """Test name must not be empty."""
        with pytest.raises(ValidationError):
            ItemRequest(name="")

    def test_to_item_uses_given_id(self):
        """Test the payload id is replaced by the caller's id."""
        item = ItemRequest(id=99, name="Item").to_item(5)

        assert item == Item(id=5, name="Item")


class TestItemRow:
    """Test Item row conversion."""

    def test_to_row_drops_missing_id(self):
        """Test inserts leave the id to the store."""
        assert "id" not in Item(id=None, name="a").to_row()

    def test_from_row_tolerates_missing_columns(self):
        """Test optional columns default to None."""
        item = Item.from_row({"id": 1, "name": "a"})

        assert item.status is None
        assert item.email is None


class TestClassifyFailure:
    """Test FailureKind classification."""

    def test_asyncio_cancellation(self):
        assert classify_failure(asyncio.CancelledError()) == FailureKind.CANCELLED

    def test_executor_cancellation(self):
        assert classify_failure(concurrent.futures.CancelledError()) == FailureKind.CANCELLED

    def test_persistence(self):
        assert classify_failure(PersistenceError("put", "boom", 1)) == FailureKind.PERSISTENCE

    def test_unexpected(self):
        assert classify_failure(KeyError("status")) == FailureKind.UNEXPECTED


class TestBatchModels:
    """Test result aggregation models."""

    def test_processing_result_skips_absent(self):
        """Test only completed outcomes become result items."""
        outcomes = [
            UnitOutcome.completed(1, Item(id=1, name="a", status="PROCESSED")),
            UnitOutcome.absent(2),
            UnitOutcome.completed(3, Item(id=3, name="c", status="PROCESSED")),
        ]

        result = ProcessingResult.create("batch_x", outcomes, processing_time=0.123)

        assert [item.id for item in result.items] == [1, 3]
        assert result.absent == 1
        assert result.total_ids == 3
        assert result.processing_time_seconds == 0.12
        assert set(result.by_id()) == {1, 3}

    def test_processing_result_timestamp_is_utc(self):
        """Test the result timestamp carries an explicit UTC offset."""
        result = ProcessingResult.create("batch_x", [], processing_time=0.0)

        assert result.timestamp.endswith("+00:00")

    def test_failed_outcome(self):
        """Test failed outcomes keep their error."""
        error = RuntimeError("x")
        outcome = UnitOutcome.failed(4, error)

        assert outcome.status == UnitStatus.FAILED
        assert outcome.error is error

    def test_batch_error_message(self):
        """Test the aggregate error names the count and first failure."""
        failures = [
            UnitFailure(2, FailureKind.PERSISTENCE, PersistenceError("get", "timeout", 2)),
            UnitFailure(5, FailureKind.CANCELLED, asyncio.CancelledError()),
        ]

        error = BatchProcessingError("batch_y", failures)

        assert "Batch batch_y failed: 2 unit(s) failed" in str(error)
        assert "item 2 [persistence]" in str(error)
        assert failures[1].describe() == "item 5 [cancelled]: CancelledError"
