"""Unit tests for the envelope machinery, pages and collections."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from wanikani.core.enums import SubjectKind
from wanikani.core.formatters import ISO8601Formatter
from wanikani.models import Assignment, ModelCollection, Page, VoiceActor
from wanikani.runtime.rest.pagination import PageCursor


class TestResourceModel:
    """Test envelope flattening and re-nesting."""

    def test_flattens_envelope(self, payloads):
        assignment = Assignment.model_validate(payloads.assignment(80463006))
        assert assignment.id == 80463006
        assert assignment.object == "assignment"
        assert assignment.url == "https://api.wanikani.com/v2/assignments/80463006"
        assert assignment.subject_type is SubjectKind.RADICAL
        assert assignment.srs_stage == 8
        assert assignment.burned_at is None
        assert assignment.started_at == datetime(2017, 9, 5, 23, 41, 28, 980679, tzinfo=UTC)

    def test_accepts_flat_input(self):
        actor = VoiceActor(
            id=1,
            url="https://api.wanikani.com/v2/voice_actors/1",
            description="Tokyo accent",
            gender="female",
            name="Kyoko",
        )
        assert actor.object == "voice_actor"

    def test_object_mismatch_is_rejected(self, payloads):
        payload = payloads.assignment()
        payload["object"] = "review"
        with pytest.raises(ValidationError):
            Assignment.model_validate(payload)

    def test_unknown_fields_ignored(self, payloads):
        payload = payloads.assignment(some_future_field=1)
        assert Assignment.model_validate(payload).id == 80463006

    def test_frozen(self, payloads):
        assignment = Assignment.model_validate(payloads.assignment())
        with pytest.raises(ValidationError):
            assignment.srs_stage = 9

    def test_dump_renests_envelope(self, payloads):
        payload = payloads.assignment()
        dumped = Assignment.model_validate(payload).model_dump(mode="json")
        assert set(dumped) == {"id", "object", "url", "data_updated_at", "data"}
        assert dumped["data"]["subject_id"] == 8761
        assert dumped["data"]["created_at"] == "2017-09-05T23:38:10.695133Z"

    def test_json_round_trip(self, payloads):
        """Test a dumped model decodes back to an equal value."""
        assignment = Assignment.model_validate(payloads.assignment())
        assert Assignment.model_validate_json(assignment.model_dump_json()) == assignment

    def test_formatter_from_context(self, payloads):
        assignment = Assignment.model_validate(payloads.assignment())
        dumped = assignment.model_dump(
            mode="json", context={"formatter": ISO8601Formatter(fractional_digits=3)}
        )
        assert dumped["data"]["created_at"] == "2017-09-05T23:38:10.695Z"

    def test_invalid_timestamp(self, payloads):
        with pytest.raises(ValidationError):
            Assignment.model_validate(payloads.assignment(created_at="last tuesday"))


class TestPage:
    """Test Page cursors."""

    def test_next_and_previous(self):
        page = Page(
            per_page=1000,
            next_url="https://api.wanikani.com/v2/subjects?page_after_id=1000",
            previous_url="https://api.wanikani.com/v2/subjects?page_before_id=1001",
        )
        assert page.next == PageCursor(after_id=1000)
        assert page.previous is None

    def test_no_next(self):
        assert Page(per_page=500).next is None


class TestModelCollection:
    """Test ModelCollection."""

    def test_decode(self, payloads):
        payload = payloads.collection(
            [payloads.assignment(1), payloads.assignment(2)], next_after_id=2, total_count=5
        )
        collection = ModelCollection[Assignment].model_validate(payload)
        assert collection.total_count == 5
        assert len(collection) == 2
        assert [a.id for a in collection] == [1, 2]
        assert collection[1].id == 2
        assert collection.pages.next == PageCursor(after_id=2)

    def test_rejects_non_collection(self, payloads):
        with pytest.raises(ValidationError):
            ModelCollection[Assignment].model_validate(payloads.assignment())
