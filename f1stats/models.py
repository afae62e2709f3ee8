"""
Normalized view models for the F1 Stats API

The upstream F1 API returns loosely typed JSON whose field names drift
between endpoints (``name`` vs ``first_name``, nested ``team`` dicts vs plain
strings ...). Every payload is converted here, once, into one of the
dataclasses below; nothing past this module reads raw upstream dicts.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class DriverRef:
    """Stable key for portrait lookups"""
    driver_id: str
    display_name: str


@dataclass
class Driver:
    driver_id: str
    name: str
    surname: str
    number: str
    nationality: str
    code: str
    team: str
    birthday: Optional[str] = None
    url: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}".strip()

    def ref(self) -> DriverRef:
        return DriverRef(self.driver_id, self.full_name)


@dataclass
class DriverStanding:
    position: Optional[int]
    points: float
    wins: int
    driver_id: str
    name: str
    surname: str
    short_name: str
    number: str
    nationality: str
    team_id: Optional[str]
    team_name: str
    classification_id: Optional[Any] = None

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}".strip()

    def ref(self) -> DriverRef:
        return DriverRef(self.driver_id, self.full_name)


@dataclass
class ConstructorStanding:
    position: Optional[int]
    points: float
    wins: int
    team_id: Optional[str]
    team_name: str
    country: str
    championships: int = 0


@dataclass
class Team:
    team_id: str
    name: str
    nationality: str
    first_appearance: Optional[int] = None
    constructors_championships: int = 0
    drivers_championships: int = 0
    position: Optional[int] = None
    url: Optional[str] = None
    drivers: List[Driver] = field(default_factory=list)


@dataclass
class Circuit:
    circuit_id: str
    name: str
    country: str
    city: str
    length_m: Optional[int] = None
    corners: Optional[int] = None
    first_participation_year: Optional[int] = None
    lap_record: Optional[str] = None
    fastest_lap_driver_id: Optional[str] = None
    fastest_lap_team_id: Optional[str] = None
    fastest_lap_year: Optional[int] = None
    url: Optional[str] = None


@dataclass
class Race:
    race_id: str
    name: str
    round: Optional[int]
    circuit_name: str
    country: str
    city: str = ""
    circuit_id: Optional[str] = None
    laps: Optional[int] = None
    # session name -> {"date": ..., "time": ...}
    schedule: Dict[str, Dict[str, Optional[str]]] = field(default_factory=dict)
    winner_id: Optional[str] = None
    url: Optional[str] = None

    @property
    def race_date(self) -> Optional[str]:
        return self.schedule.get("race", {}).get("date")

    @property
    def race_time(self) -> Optional[str]:
        return self.schedule.get("race", {}).get("time")


@dataclass
class Season:
    championship_id: str
    name: str
    year: int
    url: Optional[str] = None


@dataclass
class Champion:
    name: str
    points: float
    wins: int
    position: int
    nationality: str
    team: Optional[str] = None
    surname: str = ""
    podiums: int = 0


SESSION_TYPES = ("fp1", "fp2", "fp3", "qualy", "race")


# =============================================================================
# HELPERS
# =============================================================================
def first_of(raw: Optional[dict], *keys, default=None):
    """Return the first non-empty value found under any of ``keys``"""
    if not raw:
        return default
    for key in keys:
        value = raw.get(key)
        if value not in (None, ""):
            return value
    return default


def to_int(value, default=None) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def to_float(value, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


TEAM_NAME_ALIASES = {
    "red bull racing": "Red Bull",
    "scuderia ferrari": "Ferrari",
    "mclaren formula 1 team": "McLaren",
    "mercedes formula 1 team": "Mercedes",
    "aston martin f1 team": "Aston Martin",
    "alpine f1 team": "Alpine",
    "williams racing": "Williams",
    "haas f1 team": "Haas",
    "rb f1 team": "Racing Bulls",
    "sauber f1 team": "Sauber",
}


def simplify_team_name(team_name: Optional[str]) -> str:
    """Shorten official constructor names ("Scuderia Ferrari" -> "Ferrari")"""
    if not team_name:
        return "Unknown Team"
    return TEAM_NAME_ALIASES.get(team_name.strip().lower(), team_name)


def team_label(team) -> str:
    """Team name from either a nested team dict or a plain string"""
    if isinstance(team, dict):
        return first_of(team, "teamName", "name", "constructor_name", default="Unknown Team")
    return team or "Unknown Team"


def to_dict(obj) -> Any:
    """Serialize a model (or list of models) for JSON responses"""
    if isinstance(obj, list):
        return [to_dict(o) for o in obj]
    return asdict(obj)


# =============================================================================
# MAPPING FUNCTIONS
# =============================================================================
def driver_from_api(raw: dict) -> Driver:
    """Map an entry of ``/current/drivers`` or ``/teams/<id>/drivers``"""
    raw = raw or {}
    # team drivers nest the driver under "driver"
    if isinstance(raw.get("driver"), dict):
        raw = {**raw["driver"], **{k: v for k, v in raw.items() if k != "driver"}}

    team = first_of(raw, "teamId", "team", default="Unknown")
    return Driver(
        driver_id=first_of(raw, "driver_id", "driverId", default="unknown"),
        name=first_of(raw, "first_name", "name", default="Unknown"),
        surname=first_of(raw, "last_name", "surname", default="Driver"),
        number=str(first_of(raw, "permanent_number", "number", default="--")),
        nationality=first_of(raw, "country", "nationality", default="Unknown"),
        code=first_of(raw, "code", "shortName", default="---"),
        team=team_label(team) if isinstance(team, dict) else team,
        birthday=first_of(raw, "date_of_birth", "birthday"),
        url=raw.get("url"),
    )


def driver_standing_from_api(raw: dict) -> DriverStanding:
    """Map an entry of ``drivers_championship``"""
    raw = raw or {}
    driver = raw.get("driver") or {}
    team = raw.get("team") or {}
    return DriverStanding(
        position=to_int(raw.get("position")),
        points=to_float(raw.get("points")),
        wins=to_int(raw.get("wins"), 0),
        driver_id=first_of(raw, "driverId", "driver_id", default="unknown"),
        name=first_of(driver, "name", "first_name", default=first_of(raw, "name", default="Unknown")),
        surname=first_of(driver, "surname", "last_name", default=first_of(raw, "surname", default="")),
        short_name=first_of(driver, "shortName", "code", default="---"),
        number=str(first_of(driver, "number", default=first_of(raw, "number", default="--"))),
        nationality=first_of(driver, "nationality", default=first_of(raw, "nationality", default="Unknown")),
        team_id=first_of(raw, "teamId", default=first_of(team, "teamId") if isinstance(team, dict) else None),
        team_name=team_label(team),
        classification_id=raw.get("classificationId"),
    )


def constructor_standing_from_api(raw: dict) -> ConstructorStanding:
    """Map an entry of ``constructors_championship``"""
    raw = raw or {}
    team = raw.get("team") or {}
    if not isinstance(team, dict):
        team = {"teamName": team}
    return ConstructorStanding(
        position=to_int(raw.get("position")),
        points=to_float(raw.get("points")),
        wins=to_int(raw.get("wins"), 0),
        team_id=first_of(raw, "teamId", default=team.get("teamId")),
        team_name=first_of(team, "teamName", "name", default=first_of(raw, "teamName", "name", default="Unknown Constructor")),
        country=first_of(team, "country", default=first_of(raw, "country", "nationality", default="Unknown")),
        championships=to_int(team.get("constructorsChampionships"), 0),
    )


def team_from_api(raw: dict, drivers: Optional[List[Driver]] = None) -> Team:
    raw = raw or {}
    return Team(
        team_id=first_of(raw, "teamId", "team_id", default="unknown"),
        name=first_of(raw, "teamName", "name", default="Unknown Team"),
        nationality=first_of(raw, "teamNationality", "country", "nationality", default="Unknown"),
        first_appearance=to_int(raw.get("firstAppeareance") or raw.get("firstAppearance")),
        constructors_championships=to_int(raw.get("constructorsChampionships"), 0),
        drivers_championships=to_int(raw.get("driversChampionships"), 0),
        position=to_int(raw.get("position")),
        url=raw.get("url"),
        drivers=list(drivers or []),
    )


def circuit_from_api(raw: dict) -> Circuit:
    raw = raw or {}
    return Circuit(
        circuit_id=first_of(raw, "circuitId", "circuit_id", default="unknown"),
        name=first_of(raw, "circuitName", "name", default="Unknown Circuit"),
        country=first_of(raw, "country", default="Unknown"),
        city=first_of(raw, "city", default="Unknown"),
        length_m=to_int(raw.get("circuitLength")),
        corners=to_int(raw.get("numberOfCorners") or raw.get("corners")),
        first_participation_year=to_int(raw.get("firstParticipationYear")),
        lap_record=raw.get("lapRecord"),
        fastest_lap_driver_id=raw.get("fastestLapDriverId"),
        fastest_lap_team_id=raw.get("fastestLapTeamId"),
        fastest_lap_year=to_int(raw.get("fastestLapYear")),
        url=raw.get("url"),
    )


def schedule_from_api(raw_schedule: Optional[dict]) -> Dict[str, Dict[str, Optional[str]]]:
    schedule = {}
    for session, slot in (raw_schedule or {}).items():
        if isinstance(slot, dict):
            schedule[session] = {"date": slot.get("date"), "time": slot.get("time")}
    return schedule


def race_from_api(raw: dict) -> Race:
    raw = raw or {}
    circuit = raw.get("circuit") if isinstance(raw.get("circuit"), dict) else {}
    winner = raw.get("winner") if isinstance(raw.get("winner"), dict) else {}
    return Race(
        race_id=first_of(raw, "raceId", "race_id", default="unknown"),
        name=first_of(raw, "raceName", "name", default="Unknown Grand Prix"),
        round=to_int(raw.get("round")),
        circuit_name=first_of(circuit, "circuitName", default=first_of(raw, "circuitName", default="Unknown Circuit")),
        country=first_of(circuit, "country", default=first_of(raw, "country", default="Unknown")),
        city=first_of(circuit, "city", default=raw.get("city", "")),
        circuit_id=first_of(circuit, "circuitId", default=raw.get("circuitId")),
        laps=to_int(raw.get("laps")),
        schedule=schedule_from_api(raw.get("schedule")),
        winner_id=first_of(winner, "driverId"),
        url=raw.get("url"),
    )


def season_from_api(raw: dict) -> Season:
    raw = raw or {}
    return Season(
        championship_id=first_of(raw, "championshipId", default="unknown"),
        name=first_of(raw, "championshipName", "name", default="Formula 1 World Championship"),
        year=to_int(raw.get("year"), 0),
        url=raw.get("url"),
    )


def sort_seasons(seasons: List[Season]) -> List[Season]:
    """Newest season first"""
    return sorted(seasons, key=lambda s: s.year, reverse=True)


def pick_champion_row(rows: List[dict]) -> Optional[dict]:
    """Row in position 1, else the first row"""
    if not rows:
        return None
    for row in rows:
        if to_int(row.get("position")) == 1:
            return row
    return rows[0]


def driver_champion_from_standings(rows: List[dict]) -> Optional[Champion]:
    champion = pick_champion_row(rows)
    if champion is None:
        return None
    driver = champion.get("driver") if isinstance(champion.get("driver"), dict) else {}
    return Champion(
        name=first_of(champion, "driver_name", default=first_of(driver, "name", default=first_of(champion, "name", default="Unknown Driver"))),
        surname=first_of(champion, "driver_surname", default=first_of(driver, "surname", default=first_of(champion, "surname", default=""))),
        team=team_label(champion.get("team") or champion.get("constructor_name")),
        points=to_float(champion.get("points")),
        wins=to_int(champion.get("wins"), 0),
        podiums=to_int(champion.get("podiums"), 0),
        position=to_int(champion.get("position"), 1),
        nationality=first_of(champion, "nationality", default=first_of(driver, "nationality", default="Unknown")),
    )


def constructor_champion_from_standings(rows: List[dict]) -> Optional[Champion]:
    champion = pick_champion_row(rows)
    if champion is None:
        return None
    team = champion.get("team") if isinstance(champion.get("team"), dict) else {}
    return Champion(
        name=first_of(team, "teamName", default=first_of(champion, "teamName", "name", default="Unknown Constructor")),
        points=to_float(champion.get("points")),
        wins=to_int(champion.get("wins"), 0),
        position=to_int(champion.get("position"), 1),
        nationality=first_of(team, "country", default=first_of(champion, "country", "nationality", default="Unknown")),
    )


# =============================================================================
# SESSION RESULTS
# =============================================================================
_RESULT_KEYS = {
    "fp1": "fp1Results",
    "fp2": "fp2Results",
    "fp3": "fp3Results",
    "qualy": "qualyResults",
    "race": "results",
}

_TIME_KEYS = {
    "fp1": ("fp1Date", "fp1Time"),
    "fp2": ("fp2Date", "fp2Time"),
    "fp3": ("fp3Date", "fp3Time"),
    "qualy": ("qualyDate", "qualyTime"),
    "race": ("date", "time"),
}


def session_results(payload: Optional[dict], session: str) -> List[dict]:
    """Result rows of ``session`` from a ``/{year}/{round}/{session}`` payload"""
    races = (payload or {}).get("races")
    if not isinstance(races, dict) or session not in _RESULT_KEYS:
        return []
    return list(races.get(_RESULT_KEYS[session]) or [])


def session_time(payload: Optional[dict], session: str) -> Optional[Dict[str, Optional[str]]]:
    races = (payload or {}).get("races")
    if not isinstance(races, dict) or session not in _TIME_KEYS:
        return None
    date_key, time_key = _TIME_KEYS[session]
    return {"date": races.get(date_key), "time": races.get(time_key)}
