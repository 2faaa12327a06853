# Defines the standardized, internal data structures for the application.

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from api_adapters import ApiAdapter


class ProfileError(RuntimeError):
    """Raised when a profile file cannot be read or has the wrong shape."""


def _require(data: dict[str, Any], key: str, kind: type) -> Any:
    if not isinstance(data, dict):
        raise ProfileError(f"expected an object, got {type(data).__name__}")
    if key not in data:
        raise ProfileError(f"missing field '{key}'")
    value = data[key]
    # bool is a subclass of int, but true/false is never a duration.
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ProfileError(
            f"field '{key}' must be {kind.__name__}, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Waypoint:
    """A location with a label for people and a string for the Directions API."""
    description: str
    internal: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Waypoint:
        return cls(
            description=_require(data, 'description', str),
            internal=_require(data, 'internal', str),
        )


@dataclass(frozen=True)
class Leg:
    """
    One segment of a commute. `via` may hold several stops separated by
    '|' pipe characters, or an empty string for none.
    Durations are in seconds.
    """
    description: str
    origin: Waypoint
    destination: Waypoint
    via: Waypoint
    usual_internal_duration: int
    usual_timetable_duration: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Leg:
        if not isinstance(data, dict):
            raise ProfileError(f"a leg must be an object, got {type(data).__name__}")

        waypoints = {}
        for key in ('origin', 'destination', 'via'):
            try:
                waypoints[key] = Waypoint.from_dict(_require(data, key, dict))
            except ProfileError as e:
                raise ProfileError(f"{key}: {e}") from e

        return cls(
            description=_require(data, 'description', str),
            usual_internal_duration=_require(data, 'usual_internal_duration', int),
            usual_timetable_duration=_require(data, 'usual_timetable_duration', int),
            **waypoints,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @property
    def baseline_offset(self) -> int:
        """Difference between the timetable figure and the API's usual figure."""
        return self.usual_timetable_duration - self.usual_internal_duration

    def duration(self, adapter: ApiAdapter) -> int:
        """
        Fetches the live duration of this leg and shifts it by the baseline
        offset, so the result is comparable to the timetable duration.
        Every call makes a new API request.
        """
        live_seconds = adapter.get_duration(
            self.origin.internal, self.destination.internal, self.via.internal)
        return live_seconds + self.baseline_offset
