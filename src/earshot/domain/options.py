"""Listener configuration models."""

import typing as t
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_EMITTER = "client"
DEFAULT_EVENT_NAME = "ready"
DEFAULT_CATEGORY = "default"


class ListenerType(str, Enum):
    """Subscription mode of a listener.

    ON fires on every emission, ONCE is removed after the first one.
    """

    ON = "on"
    ONCE = "once"


DEFAULT_TYPE = ListenerType.ON.value


class ListenerOptions(BaseModel):
    """Options a listener is constructed with.

    Values are deliberately loose: a listener does not check its emitter,
    event name, type or category. The handler validates them when it
    registers the listener. None (or any falsy value) means "use the
    default". Option names are checked: unknown keys are rejected, and the
    camelCase "eventName" is accepted for event_name.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    emitter: t.Any = Field(
        default=DEFAULT_EMITTER,
        description="Emitter key known to the handler, or an emitter object",
    )
    event_name: t.Any = Field(
        default=DEFAULT_EVENT_NAME, alias="eventName", description="Event to listen to"
    )
    type: t.Any = Field(
        default=DEFAULT_TYPE, description="Subscription mode: 'on' or 'once'"
    )
    category: t.Any = Field(
        default=DEFAULT_CATEGORY, description="Free-form grouping label"
    )


class ListenerInfo(BaseModel):
    """Read-only snapshot of a listener, used for reporting."""

    id: str = Field(description="Listener id")
    emitter: str = Field(description="Emitter key, or the emitter's type name")
    event_name: str = Field(description="Event listened to")
    type: str = Field(description="Subscription mode")
    category: str = Field(description="Category label")
    enabled: bool = Field(description="Whether the listener is subscribed")
    filepath: str | None = Field(default=None, description="Source file, if any")
