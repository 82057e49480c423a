"""
Time-slot Data Model
====================
This module defines the records that flow through the layout engine.

Why is this file needed?
------------------------
1. Input: `Candidate` is one suggested meeting time with its busyness count,
   decoded from the suggestions payload of the scheduling backend.
2. Output: `PlacedBubble` is what the engine hands to the renderer.

Classes:
    Candidate: Immutable (label, weight) pair.
    PlacedBubble: Candidate plus center and diameter.
    SuggestionPayloadError: Raised for payloads that cannot be decoded.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import numbers
from typing import Any, List, Mapping, Sequence, Tuple, Union

from timeslotbubbles.model.geometry_primitives import Circle, Point

logger = logging.getLogger(__name__)


class SuggestionPayloadError(ValueError):
    """The suggestions payload does not have the expected shape."""


@dataclass(frozen=True)
class Candidate:
    """
    One time-slot suggestion.

    Attributes:
        label: Opaque slot identifier, e.g. "2024-01-10 09:00".
        weight: Busyness count; lower is more desirable.
    """
    label: str
    weight: int

    def __post_init__(self) -> None:
        if isinstance(self.weight, bool) or not isinstance(self.weight, numbers.Integral):
            raise ValueError(f"Weight of '{self.label}' must be an integer, got {self.weight!r}")
        # numpy integers are accepted but stored as plain int
        object.__setattr__(self, "weight", int(self.weight))
        if self.weight < 0:
            raise ValueError(f"Weight of '{self.label}' must be non-negative, got {self.weight}")

    def formatted_time(self) -> str:
        """Time part of the label ("2024-01-10 09:00" -> "09:00")."""
        _, sep, time_part = self.label.partition(" ")
        return time_part if sep else self.label

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Candidate:
        """Decode one entry of the backend's `suggestions` list."""
        try:
            slot = data["slot"]
            busy_count = data["busy_count"]
        except (KeyError, TypeError) as e:
            raise SuggestionPayloadError(f"Invalid suggestion entry {data!r}: missing {e}") from e
        if not isinstance(slot, str):
            raise SuggestionPayloadError(f"Suggestion slot must be a string, got {slot!r}")
        try:
            return cls(label=slot, weight=busy_count)
        except ValueError as e:
            raise SuggestionPayloadError(str(e)) from e

    @classmethod
    def coerce(cls, item: Union[Candidate, Tuple[str, int], Sequence[Any]]) -> Candidate:
        """Accept either a Candidate or a (label, weight) pair."""
        if isinstance(item, Candidate):
            return item
        label, weight = item
        return cls(label=str(label), weight=weight)


@dataclass(frozen=True)
class PlacedBubble:
    """A candidate with its final position on the canvas."""
    candidate: Candidate
    center: Point
    diameter: float

    @property
    def radius(self) -> float:
        return self.diameter / 2.0

    @property
    def label(self) -> str:
        return self.candidate.label

    def as_circle(self) -> Circle:
        return Circle(center=self.center, radius=self.radius)


def parse_suggestions(payload: Mapping[str, Any]) -> List[Candidate]:
    """
    Decode a suggestions response into candidates, least busy first.

    Two shapes are accepted, matching what the backend returns:
        {"suggestions": [{"slot": ..., "busy_count": ...}, ...]}
        {"data": {"suggestions": [...]}, "error": null}

    Args:
        payload: Decoded JSON object.

    Returns:
        Candidates sorted by weight ascending; equal weights keep payload order.

    Raises:
        SuggestionPayloadError: If the payload has neither shape or the
            envelope reports an error.
    """
    if not isinstance(payload, Mapping):
        raise SuggestionPayloadError(f"Expected a JSON object, got {type(payload).__name__}")

    body: Any = payload
    if "suggestions" not in payload:
        data = payload.get("data")
        if data is None:
            error = payload.get("error") or "response contains no suggestions"
            raise SuggestionPayloadError(str(error))
        body = data

    if not isinstance(body, Mapping) or not isinstance(body.get("suggestions"), list):
        raise SuggestionPayloadError("'suggestions' must be a list")

    candidates = [Candidate.from_dict(entry) for entry in body["suggestions"]]
    candidates.sort(key=lambda c: c.weight)
    logger.debug(f"Decoded {len(candidates)} time-slot suggestions.")
    return candidates
