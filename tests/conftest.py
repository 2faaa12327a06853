from __future__ import annotations

import json

import pytest

from api_adapters import ApiAdapter


class StubAdapter(ApiAdapter):
    def __init__(self, durations: list[int]):
        self.durations = list(durations)
        self.calls: list[tuple[str, str, str]] = []

    def get_duration(self, origin: str, destination: str, waypoints: str) -> int:
        self.calls.append((origin, destination, waypoints))
        return self.durations.pop(0)


def make_leg_dict(description: str = "Morning", internal: int = 1500, timetable: int = 1800) -> dict:
    return {
        "description": description,
        "origin": {"description": "Home", "internal": "Home St 1, Springfield"},
        "destination": {"description": "Work", "internal": "place_id:ChIJwork"},
        "via": {"description": "Bridge", "internal": "52.1,4.3|52.2,4.4"},
        "usual_internal_duration": internal,
        "usual_timetable_duration": timetable,
    }


@pytest.fixture()
def write_profile(tmp_path):
    def _write(legs, name: str = "profile.json"):
        path = tmp_path / name
        path.write_text(json.dumps(legs), encoding="utf-8")
        return path

    return _write
