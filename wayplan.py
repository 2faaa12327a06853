# Main script to report the expected traffic delay on each leg of a commute.

import sys
import argparse
from dotenv import load_dotenv

from api_adapters import ApiAdapter, DirectionsError, GoogleMapsAdapter
from api_structures import Leg, ProfileError
from profile_loader import DEFAULT_PROFILE_PATH, get_profile


def format_minutes(seconds: int) -> str:
    """Converts seconds into 'M:SS', or '-M:SS' when negative."""
    sign = "-" if seconds < 0 else ""
    minutes, secs = divmod(abs(seconds), 60)
    return f"{sign}{minutes}:{secs:02d}"


def format_leg(leg: Leg, predicted_seconds: int) -> str:
    """Builds the report block for one leg, ending with a blank line."""
    deviation = predicted_seconds - leg.usual_timetable_duration
    return (f"{leg.description}: {leg.origin.description} -> {leg.destination.description}\n"
            f"    Predicted duration: {format_minutes(predicted_seconds)} min "
            f"(deviation {format_minutes(deviation)} min)\n")


# --- Core Logic ---

def display_report(profile: list[Leg], api_adapter: ApiAdapter):
    """
    Prints one block per leg, in profile order.
    Each leg is fetched exactly once; the first failure aborts the report.
    """
    for leg in profile:
        predicted = leg.duration(api_adapter)
        print(format_leg(leg, predicted))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Wayplan: compare live traffic on your commute with the timetable.")
    parser.add_argument('profile', nargs='?', default=DEFAULT_PROFILE_PATH,
                        help=f"JSON file describing the legs to check (default: {DEFAULT_PROFILE_PATH}).")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="Enable verbose mode to see the exact API calls being made.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    try:
        profile = get_profile(args.profile)
        api_adapter = GoogleMapsAdapter(verbose=args.verbose)
        display_report(profile, api_adapter)
    except (ProfileError, DirectionsError, ValueError) as e:
        print(f"FATAL ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
