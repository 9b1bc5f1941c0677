"""
Domain events.

Events are immutable past-tense facts. `sequence` is the 1-based position of
the event in the log; append order is causal order.
"""

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, TypeAdapter

from .types import Slug, Url


class LinkCreated(BaseModel):
    """A short link was created. Recorded once per successful create."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["link_created"] = "link_created"
    sequence: PositiveInt
    slug: Slug
    url: Url


class RedirectOccurred(BaseModel):
    """A short link was followed. Recorded once per successful redirect."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["redirect_occurred"] = "redirect_occurred"
    sequence: PositiveInt
    slug: Slug


Event = Annotated[Union[LinkCreated, RedirectOccurred], Field(discriminator="kind")]

# Serializes and parses whole event streams, e.g. {"kind": ..., "sequence": ...}
EventStream = TypeAdapter(List[Event])
