"""
Tests for the shared response envelope, validation collector and links.
"""

import pytest

from financial_api.interfaces.user.schemas import UserRepresentation
from financial_api.shared.links import Link, build_self_href, self_link
from financial_api.shared.responses import Failure, Success
from financial_api.shared.validation import ValidationOutcome, bind, format_error


class TestEnvelope:
    """Tests for Success and Failure envelopes."""

    def test_success_body_has_data_and_no_errors(self) -> None:
        """Success bodies carry the payload and an empty error list."""
        body = Success(UserRepresentation(id=1, name="Alice")).to_body()

        assert body["errors"] == []
        assert body["data"]["id"] == 1
        assert body["data"]["name"] == "Alice"
        assert body["data"]["role"] == "ROLE_USER"

    def test_failure_body_has_errors_only(self) -> None:
        """Failure bodies carry only the messages, in order."""
        body = Failure.from_messages("first", "second").to_body()
        assert body == {"errors": ["first", "second"]}

    def test_failure_requires_a_message(self) -> None:
        """An empty failure cannot be built."""
        with pytest.raises(ValueError):
            Failure(messages=())


class TestValidationOutcome:
    """Tests for binding and message collection."""

    def test_valid_payload_binds(self) -> None:
        """A valid payload binds with no errors."""
        body, outcome = bind(UserRepresentation, {"name": "Alice"})

        assert body is not None
        assert body.name == "Alice"
        assert not outcome.has_errors

    def test_missing_name_reports_blank(self) -> None:
        """A missing name is reported as blank."""
        body, outcome = bind(UserRepresentation, {})

        assert body is None
        assert outcome.messages == ("name must not be blank",)

    def test_whitespace_name_reports_blank(self) -> None:
        """A whitespace-only name is reported as blank."""
        _, outcome = bind(UserRepresentation, {"name": "   "})
        assert outcome.messages == ("name must not be blank",)

    def test_short_name_reports_length(self) -> None:
        """Names under 3 characters report the allowed length."""
        _, outcome = bind(UserRepresentation, {"name": "Al"})
        assert outcome.messages == ("name must be between 3 and 100 characters",)

    def test_errors_keep_field_order(self) -> None:
        """Errors are reported in field declaration order."""
        _, outcome = bind(UserRepresentation, {"id": "abc", "role": "ROLE_ROOT"})

        assert len(outcome.messages) == 3
        assert outcome.messages[0].startswith("id ")
        assert outcome.messages[1] == "name must not be blank"
        assert outcome.messages[2].startswith("role ")

    def test_non_object_payload_reports_root_error(self) -> None:
        """Non-object payloads report a single root-level error."""
        body, outcome = bind(UserRepresentation, ["Alice"])

        assert body is None
        assert outcome.has_errors
        assert not outcome.messages[0].startswith("name")

    def test_request_section_is_stripped(self) -> None:
        """Framework location prefixes are dropped from the field path."""
        error = {"loc": ("path", "user_id"), "msg": "Input should be a valid integer"}
        assert format_error(error) == "user_id input should be a valid integer"

    def test_undecodable_json_message_is_kept(self) -> None:
        """JSON decode errors keep their message without a location."""
        error = {"loc": ("body", 7), "msg": "JSON decode error", "type": "json_invalid"}
        assert format_error(error) == "JSON decode error"

    def test_ok_outcome_is_empty(self) -> None:
        """An ok outcome has no messages."""
        assert ValidationOutcome.ok().messages == ()


class TestLinks:
    """Tests for self-link construction."""

    def test_href_joins_base_and_id(self) -> None:
        """The id is appended to the collection URL."""
        assert build_self_href("http://api/financial/v1/user", 42) == "http://api/financial/v1/user/42"

    def test_trailing_slash_is_not_doubled(self) -> None:
        """A trailing slash on the base URL is not duplicated."""
        assert build_self_href("http://api/user/", "7") == "http://api/user/7"

    def test_self_link_rel(self) -> None:
        """self_link builds a link with rel "self"."""
        assert self_link("http://api/user", 1) == Link(rel="self", href="http://api/user/1")
