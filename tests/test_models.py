"""
Unit tests for sessionkeeper data models.
"""

import json
import os
import sys

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sessionkeeper.modules.api import SessionRecord


class TestSessionRecord:
    """Test the persisted session record."""

    def test_populate_by_alias_or_name(self):
        by_alias = SessionRecord(sessionId="s-1", sessionDate=5)
        by_name = SessionRecord(session_id="s-1", session_date=5)
        assert by_alias == by_name

    def test_stored_form_is_flat(self):
        record = SessionRecord(session_id="s-1", session_date=5, data={"name": "Ada", "n": 2})

        assert json.loads(record.to_json()) == {
            "sessionId": "s-1",
            "sessionDate": 5,
            "name": "Ada",
            "n": 2,
        }

    def test_from_json_splits_payload(self):
        record = SessionRecord.from_json(
            '{"sessionId": "s-1", "sessionDate": 5, "cart": {"items": [1, 2]}}'
        )
        assert record.session_id == "s-1"
        assert record.session_date == 5
        assert record.data == {"cart": {"items": [1, 2]}}
        assert record["cart"]["items"] == [1, 2]
        assert "cart" in record
        assert record.get("missing", "x") == "x"

    def test_payload_cannot_shadow_protected_fields(self):
        record = SessionRecord(session_id="s-1", session_date=5, data={"sessionId": "evil"})
        assert record.to_dict()["sessionId"] == "s-1"

    def test_from_json_rejects_non_object(self):
        with pytest.raises(ValueError):
            SessionRecord.from_json("[1, 2]")

    def test_from_json_requires_protected_fields(self):
        with pytest.raises(ValidationError):
            SessionRecord.from_json('{"name": "Ada"}')

    def test_negative_session_date_rejected(self):
        with pytest.raises(ValidationError):
            SessionRecord(session_id="s-1", session_date=-1)

    def test_merged_overrides_and_keeps_original(self):
        original = SessionRecord(session_id="s-1", session_date=5, data={"a": 1, "b": 2})

        merged = original.merged({"b": 3, "c": 4})

        assert merged.data == {"a": 1, "b": 3, "c": 4}
        assert merged.session_date == 5
        assert original.data == {"a": 1, "b": 2}

    def test_empty_record(self):
        empty = SessionRecord.empty()
        assert empty.is_empty
        assert empty.session_date == 0
        assert empty.data == {}

    def test_protected_fields(self):
        assert SessionRecord.PROTECTED_FIELDS == {"sessionId", "sessionDate", "ttl"}
