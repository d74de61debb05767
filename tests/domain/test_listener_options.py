"""Tests for listener option models."""

import pytest
from pydantic import ValidationError

from earshot.domain.options import ListenerInfo, ListenerOptions, ListenerType


class TestListenerOptions:
    def test_defaults(self):
        options = ListenerOptions()

        assert options.emitter == "client"
        assert options.event_name == "ready"
        assert options.type == "on"
        assert options.category == "default"

    def test_accepts_arbitrary_emitter_objects(self):
        sentinel = object()

        options = ListenerOptions(emitter=sentinel)

        assert options.emitter is sentinel

    def test_accepts_unknown_type_values(self):
        assert ListenerOptions(type="sometimes").type == "sometimes"

    @pytest.mark.parametrize("field", ["event_name", "type", "category"])
    def test_accepts_non_string_values(self, field):
        options = ListenerOptions(**{field: 5})

        assert getattr(options, field) == 5

    def test_event_name_accepts_camel_case_alias(self):
        options = ListenerOptions(eventName="messageCreate")

        assert options.event_name == "messageCreate"

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError, match="evnt"):
            ListenerOptions(evnt="message")

    def test_is_frozen(self):
        options = ListenerOptions()

        with pytest.raises(ValidationError):
            options.event_name = "message"


class TestListenerType:
    @pytest.mark.parametrize(
        "value, expected", [("on", ListenerType.ON), ("once", ListenerType.ONCE)]
    )
    def test_from_string(self, value, expected):
        assert ListenerType(value) is expected

    def test_compares_equal_to_string(self):
        assert ListenerType.ONCE == "once"

    def test_rejects_unknown(self):
        with pytest.raises(ValueError):
            ListenerType("sometimes")


class TestListenerInfo:
    def test_filepath_optional(self):
        info = ListenerInfo(
            id="ping",
            emitter="client",
            event_name="ready",
            type="on",
            category="default",
            enabled=True,
        )

        assert info.filepath is None
