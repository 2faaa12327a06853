# Reads commute profiles (ordered lists of legs) from JSON files.

import json

from api_structures import Leg, ProfileError

DEFAULT_PROFILE_PATH = "profile.json"


def load_profile(path: str) -> list[Leg]:
    """Loads an array of legs from the given JSON file, keeping their order."""
    try:
        with open(path, "r", encoding="utf-8") as profile_file:
            content = profile_file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ProfileError(f"Could not read profile '{path}': {e}") from e

    try:
        raw_legs = json.loads(content)
    except json.JSONDecodeError as e:
        raise ProfileError(f"Profile '{path}' is not valid JSON: {e}") from e

    if not isinstance(raw_legs, list):
        raise ProfileError(f"Profile '{path}' must contain a JSON array of legs.")

    legs = []
    for index, raw_leg in enumerate(raw_legs):
        try:
            legs.append(Leg.from_dict(raw_leg))
        except ProfileError as e:
            raise ProfileError(f"Profile '{path}', leg {index}: {e}") from e
    return legs


def get_profile(path: str | None = None) -> list[Leg]:
    """Loads the profile at `path`, or 'profile.json' in the working directory."""
    return load_profile(path if path is not None else DEFAULT_PROFILE_PATH)
