import pytest
import requests

from f1stats.app.api import create_app
from f1stats.cache_layer import CacheLayer
from f1stats.errors import ImageLookupError
from f1stats.services.driver_images import DriverImageResolver
from f1stats.services.f1_api import F1ApiClient
from f1stats.utils.config import TestingConfig

BASE_URL = "https://f1api.dev/api"


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self.payload = payload

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    """Stands in for requests.Session; routes map API paths to payloads"""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.headers = {}
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append(url)
        path = url.split("/api/", 1)[1] if "/api/" in url else url
        route = self.routes.get(path)
        if isinstance(route, Exception):
            raise route
        if route is None:
            return FakeResponse(404, {"message": "not found"})
        if isinstance(route, FakeResponse):
            return route
        return FakeResponse(200, route)


class FakeImageSource:
    """Wikipedia stand-in: title -> thumbnail URL, or an exception to raise"""

    def __init__(self, images=None):
        self.images = dict(images or {})
        self.calls = []

    def lookup(self, title):
        self.calls.append(title)
        result = self.images.get(title)
        if isinstance(result, Exception):
            raise result
        return result


DRIVER_STANDINGS = {
    "season": 2025,
    "drivers_championship": [
        {
            "classificationId": 1,
            "driverId": "piastri",
            "teamId": "mclaren",
            "points": 324,
            "position": 1,
            "wins": 7,
            "driver": {"name": "Oscar", "surname": "Piastri", "nationality": "Australia",
                       "number": 81, "shortName": "PIA"},
            "team": {"teamId": "mclaren", "teamName": "McLaren Formula 1 Team", "country": "Great Britain"},
        },
        {
            "classificationId": 2,
            "driverId": "norris",
            "teamId": "mclaren",
            "points": 293,
            "position": 2,
            "wins": 5,
            "driver": {"name": "Lando", "surname": "Norris", "nationality": "Great Britain",
                       "number": 4, "shortName": "NOR"},
            "team": {"teamId": "mclaren", "teamName": "McLaren Formula 1 Team", "country": "Great Britain"},
        },
        {
            "classificationId": 3,
            "driverId": "max_verstappen",
            "teamId": "red_bull",
            "points": 255,
            "position": 3,
            "wins": 3,
            "driver": {"name": "Max", "surname": "Verstappen", "nationality": "Netherlands",
                       "number": 33, "shortName": "VER"},
            "team": {"teamId": "red_bull", "teamName": "Red Bull Racing", "country": "Austria"},
        },
        {
            "classificationId": 4,
            "driverId": "russell",
            "teamId": "mercedes",
            "points": 212,
            "position": 4,
            "wins": 1,
            "driver": {"name": "George", "surname": "Russell", "nationality": "Great Britain",
                       "number": 63, "shortName": "RUS"},
            "team": {"teamId": "mercedes", "teamName": "Mercedes Formula 1 Team", "country": "Germany"},
        },
    ],
}

CONSTRUCTOR_STANDINGS = {
    "season": 2025,
    "constructors_championship": [
        {
            "classificationId": 1,
            "teamId": "mclaren",
            "points": 617,
            "position": 1,
            "wins": 12,
            "team": {"teamName": "McLaren Formula 1 Team", "country": "Great Britain",
                     "constructorsChampionships": 9},
        },
        {
            "classificationId": 2,
            "teamId": "ferrari",
            "points": 280,
            "position": 2,
            "wins": 0,
            "team": {"teamName": "Scuderia Ferrari", "country": "Italy",
                     "constructorsChampionships": 16},
        },
    ],
}

CURRENT_SEASON = {
    "season": 2025,
    "races": [
        {
            "raceId": "australian_2025",
            "raceName": "Australian Grand Prix 2025",
            "round": 1,
            "circuit": {"circuitId": "albert_park", "circuitName": "Albert Park Circuit",
                        "country": "Australia", "city": "Melbourne"},
            "schedule": {
                "race": {"date": "2025-03-16", "time": "04:00:00Z"},
                "qualy": {"date": "2025-03-15", "time": "05:00:00Z"},
            },
        },
        {
            "raceId": "abu_dhabi_2099",
            "raceName": "Abu Dhabi Grand Prix 2099",
            "round": 2,
            "circuit": {"circuitId": "yas_marina", "circuitName": "Yas Marina Circuit",
                        "country": "United Arab Emirates", "city": "Abu Dhabi"},
            "schedule": {
                "race": {"date": "2099-12-06", "time": "13:00:00Z"},
            },
        },
        {
            "raceId": "tbd_2025",
            "raceName": "Mystery Grand Prix",
            "round": 3,
            "circuit": {"circuitName": "Somewhere", "country": "Nowhere"},
            "schedule": {"race": {"date": None, "time": None}},
        },
    ],
}

NEXT_RACE = {
    "season": 2099,
    "round": 2,
    "race": [CURRENT_SEASON["races"][1]],
}

ALL_DRIVERS = {
    "drivers": [
        {"driverId": "hamilton", "name": "Lewis", "surname": "Hamilton", "nationality": "Great Britain",
         "birthday": "07/01/1985", "number": 44, "shortName": "HAM", "teamId": "ferrari"},
        {"driver_id": "alonso", "first_name": "Fernando", "last_name": "Alonso", "country": "Spain",
         "date_of_birth": "1981-07-29", "permanent_number": 14, "code": "ALO", "team": "aston_martin"},
    ],
}

TEAMS = {
    "teams": [
        {"teamId": "ferrari", "teamName": "Scuderia Ferrari", "teamNationality": "Italy",
         "constructorsChampionships": 16, "position": 2},
        {"teamId": "mclaren", "teamName": "McLaren Formula 1 Team", "teamNationality": "Great Britain",
         "constructorsChampionships": 9, "position": 1},
    ],
}

MCLAREN_DRIVERS = {
    "drivers": [
        {"driver": {"driverId": "norris", "name": "Lando", "surname": "Norris", "number": 4, "shortName": "NOR"}},
        {"driver": {"driverId": "piastri", "name": "Oscar", "surname": "Piastri", "number": 81, "shortName": "PIA"}},
    ],
}

SEASONS = {
    "championships": [
        {"championshipId": "f1_2023", "championshipName": "2023 Formula 1 World Championship", "year": 2023},
        {"championshipId": "f1_2025", "championshipName": "2025 Formula 1 World Championship", "year": 2025},
        {"championshipId": "f1_2024", "championshipName": "2024 Formula 1 World Championship", "year": 2024},
    ],
}

RACE_RESULTS = {
    "season": 2025,
    "races": {
        "round": 1,
        "date": "2025-03-16",
        "time": "04:00:00Z",
        "raceName": "Australian Grand Prix 2025",
        "results": [
            {"position": 1, "driver": {"driverId": "norris"}, "time": "1:42:06.304"},
            {"position": 2, "driver": {"driverId": "max_verstappen"}, "time": "+0.895"},
        ],
    },
}

CIRCUITS = {
    "circuits": [
        {"circuitId": "monza", "circuitName": "Autodromo Nazionale Monza", "country": "Italy",
         "city": "Monza", "circuitLength": 5793, "numberOfCorners": 11, "firstParticipationYear": 1950,
         "lapRecord": "1:21:046", "fastestLapDriverId": "barrichello", "fastestLapTeamId": "ferrari"},
        {"circuitId": "madring", "circuitName": "Madring", "country": "Spain", "city": "Madrid",
         "circuitLength": 5474, "numberOfCorners": 20},
    ],
}

API_ROUTES = {
    "current/drivers-championship": DRIVER_STANDINGS,
    "current/constructors-championship": CONSTRUCTOR_STANDINGS,
    "current/next": NEXT_RACE,
    "current": CURRENT_SEASON,
    "current/drivers": ALL_DRIVERS,
    "current/teams": TEAMS,
    "current/teams/mclaren/drivers": MCLAREN_DRIVERS,
    "seasons": SEASONS,
    "2024/drivers-championship": DRIVER_STANDINGS,
    "2024/constructors-championship": CONSTRUCTOR_STANDINGS,
    "2025/1/race": RACE_RESULTS,
    "circuits": CIRCUITS,
}


@pytest.fixture
def cache():
    return CacheLayer()


@pytest.fixture
def image_source():
    return FakeImageSource({
        "Lewis Hamilton Formula One driver": "https://upload.wikimedia.org/hamilton.jpg",
        "Oscar Piastri Formula One driver": "https://upload.wikimedia.org/piastri.jpg",
        "Lando Norris": "https://upload.wikimedia.org/norris.jpg",
        "Max Verstappen racing driver": "https://upload.wikimedia.org/verstappen.jpg",
    })


@pytest.fixture
def resolver(image_source, cache):
    return DriverImageResolver(image_source, cache)


@pytest.fixture
def api_session():
    return FakeSession(API_ROUTES)


@pytest.fixture
def f1_client(api_session):
    return F1ApiClient(base_url=BASE_URL, session=api_session)


@pytest.fixture
def app(resolver, f1_client, cache):
    return create_app(TestingConfig(), resolver=resolver, f1_client=f1_client, cache=cache)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def lookup_error():
    return ImageLookupError("connection reset")


@pytest.fixture
def timeout_error():
    return requests.Timeout("read timed out")
