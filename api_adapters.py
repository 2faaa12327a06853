# Contains the adapter classes for communicating with external mapping APIs.

import requests
import os
from abc import ABC, abstractmethod
from dotenv import load_dotenv

# --- API Configuration ---
# Keys are read from environment variables (or a .env file) for security,
# when each adapter is created.
load_dotenv()


class DirectionsError(RuntimeError):
    """Raised when a travel duration cannot be obtained from the API."""


class ApiAdapter(ABC):
    """
    Abstract Base Class (blueprint) for all API clients.
    It ensures every adapter we create has the same public methods.
    """
    @abstractmethod
    def get_duration(self, origin: str, destination: str, waypoints: str) -> int:
        """Returns the current driving time in seconds from origin to destination."""
        pass


class GoogleMapsAdapter(ApiAdapter):
    """The adapter for the Google Maps Directions API."""
    DIRECTIONS_URL = "https://maps.googleapis.com/maps/api/directions/json"

    def __init__(self, api_key: str | None = None, verbose: bool = False):
        self.api_key = api_key if api_key is not None else os.getenv("GOOGLE_API_KEY")
        self.verbose = verbose
        if not self.api_key:
            raise ValueError(
                "The GOOGLE_API_KEY environment variable is not set.")

    def get_duration(self, origin: str, destination: str, waypoints: str) -> int:
        """
        Asks for a driving route leaving now and sums the traffic-aware
        duration of every leg of the first route. Multiple waypoints are
        separated by | pipe characters, as the Directions API expects.
        """
        params = {
            'origin': origin,
            'destination': destination,
            'waypoints': waypoints,
            'departure_time': 'now',
            'traffic_model': 'best_guess',
            'mode': 'driving',
            'key': self.api_key
        }
        if self.verbose:
            via_str = f" via '{waypoints}'" if waypoints else ""
            print(f"   > [Google] Requesting directions: '{origin}' -> '{destination}'{via_str}")

        try:
            response = requests.get(self.DIRECTIONS_URL, params=params)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            # Covers connection failures and, since requests 2.27, JSON decoding errors.
            raise DirectionsError(
                f"Could not get directions from '{origin}' to '{destination}': {e}") from e

        return self._sum_leg_durations(data, origin, destination)

    @staticmethod
    def _sum_leg_durations(data: dict, origin: str, destination: str) -> int:
        route_str = f"'{origin}' -> '{destination}'"
        if not isinstance(data, dict):
            raise DirectionsError(f"Unexpected response for {route_str}.")
        if data.get('status') != 'OK':
            message = data.get('error_message', 'no error message')
            raise DirectionsError(
                f"Google returned status {data.get('status')} for {route_str}: {message}")

        try:
            legs = data['routes'][0]['legs']
            if not legs:
                raise DirectionsError(f"The route for {route_str} has no legs.")

            total_seconds = 0
            for leg in legs:
                value = leg['duration_in_traffic']['value']
                if not isinstance(value, int) or isinstance(value, bool):
                    raise DirectionsError(
                        f"Invalid duration_in_traffic value {value!r} for {route_str}.")
                total_seconds += value
        except (KeyError, IndexError, TypeError) as e:
            # Traffic data is only present for driving requests with a departure time.
            raise DirectionsError(
                f"Could not read duration_in_traffic for {route_str}: {e!r}") from e

        return total_seconds
