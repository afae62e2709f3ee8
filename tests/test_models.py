from f1stats.models import (
    DriverRef,
    circuit_from_api,
    constructor_champion_from_standings,
    constructor_standing_from_api,
    driver_champion_from_standings,
    driver_from_api,
    driver_standing_from_api,
    race_from_api,
    season_from_api,
    session_results,
    session_time,
    simplify_team_name,
    sort_seasons,
    team_from_api,
    to_dict,
)

from conftest import (
    ALL_DRIVERS,
    CIRCUITS,
    CONSTRUCTOR_STANDINGS,
    CURRENT_SEASON,
    DRIVER_STANDINGS,
    MCLAREN_DRIVERS,
    RACE_RESULTS,
    SEASONS,
)


def test_driver_standing_from_api():
    standing = driver_standing_from_api(DRIVER_STANDINGS["drivers_championship"][2])

    assert standing.position == 3
    assert standing.points == 255.0
    assert standing.driver_id == "max_verstappen"
    assert standing.full_name == "Max Verstappen"
    assert standing.short_name == "VER"
    assert standing.number == "33"
    assert standing.team_id == "red_bull"
    assert standing.team_name == "Red Bull Racing"
    assert standing.ref() == DriverRef("max_verstappen", "Max Verstappen")


def test_driver_standing_defaults():
    standing = driver_standing_from_api({})
    assert standing.driver_id == "unknown"
    assert standing.position is None
    assert standing.points == 0.0
    assert standing.team_name == "Unknown Team"


def test_driver_from_api_field_variants():
    camel, snake = (driver_from_api(raw) for raw in ALL_DRIVERS["drivers"])

    assert camel.driver_id == "hamilton"
    assert camel.full_name == "Lewis Hamilton"
    assert camel.code == "HAM"
    assert camel.team == "ferrari"
    assert camel.birthday == "07/01/1985"

    assert snake.driver_id == "alonso"
    assert snake.full_name == "Fernando Alonso"
    assert snake.number == "14"
    assert snake.nationality == "Spain"
    assert snake.team == "aston_martin"


def test_driver_from_api_nested_driver():
    driver = driver_from_api(MCLAREN_DRIVERS["drivers"][0])
    assert driver.driver_id == "norris"
    assert driver.ref() == DriverRef("norris", "Lando Norris")


def test_constructor_standing_from_api():
    standing = constructor_standing_from_api(CONSTRUCTOR_STANDINGS["constructors_championship"][1])
    assert standing.team_id == "ferrari"
    assert standing.team_name == "Scuderia Ferrari"
    assert standing.country == "Italy"
    assert standing.championships == 16


def test_team_from_api_keeps_drivers():
    drivers = [driver_from_api(d) for d in MCLAREN_DRIVERS["drivers"]]
    team = team_from_api({"teamId": "mclaren", "teamName": "McLaren Formula 1 Team", "position": "1"}, drivers)

    assert team.position == 1
    assert [d.driver_id for d in team.drivers] == ["norris", "piastri"]
    assert to_dict(team)["drivers"][0]["surname"] == "Norris"


def test_circuit_from_api():
    circuit = circuit_from_api(CIRCUITS["circuits"][0])
    assert circuit.circuit_id == "monza"
    assert circuit.length_m == 5793
    assert circuit.corners == 11
    assert circuit.fastest_lap_driver_id == "barrichello"


def test_race_from_api():
    race = race_from_api(CURRENT_SEASON["races"][0])
    assert race.race_id == "australian_2025"
    assert race.round == 1
    assert race.circuit_name == "Albert Park Circuit"
    assert race.country == "Australia"
    assert race.race_date == "2025-03-16"
    assert race.race_time == "04:00:00Z"
    assert race.schedule["qualy"] == {"date": "2025-03-15", "time": "05:00:00Z"}


def test_race_without_schedule():
    race = race_from_api({"raceName": "Test GP"})
    assert race.race_date is None
    assert race.race_time is None


def test_seasons_sorted_newest_first():
    seasons = sort_seasons([season_from_api(s) for s in SEASONS["championships"]])
    assert [s.year for s in seasons] == [2025, 2024, 2023]


def test_simplify_team_name():
    assert simplify_team_name("Scuderia Ferrari") == "Ferrari"
    assert simplify_team_name("McLaren Formula 1 Team") == "McLaren"
    assert simplify_team_name("Brand New Racing") == "Brand New Racing"
    assert simplify_team_name(None) == "Unknown Team"


def test_driver_champion_prefers_position_one():
    rows = list(reversed(DRIVER_STANDINGS["drivers_championship"]))
    champion = driver_champion_from_standings(rows)

    assert champion.name == "Oscar"
    assert champion.surname == "Piastri"
    assert champion.team == "McLaren Formula 1 Team"
    assert champion.position == 1


def test_champion_falls_back_to_first_row():
    rows = [{"position": None, "driver": {"name": "Ayrton", "surname": "Senna"}, "points": "90"}]
    champion = driver_champion_from_standings(rows)
    assert champion.surname == "Senna"
    assert champion.points == 90.0


def test_no_champion_without_rows():
    assert driver_champion_from_standings([]) is None
    assert constructor_champion_from_standings([]) is None


def test_constructor_champion():
    champion = constructor_champion_from_standings(CONSTRUCTOR_STANDINGS["constructors_championship"])
    assert champion.name == "McLaren Formula 1 Team"
    assert champion.nationality == "Great Britain"
    assert champion.wins == 12


def test_session_results_and_time():
    assert [r["position"] for r in session_results(RACE_RESULTS, "race")] == [1, 2]
    assert session_results(RACE_RESULTS, "qualy") == []
    assert session_results(None, "race") == []
    assert session_time(RACE_RESULTS, "race") == {"date": "2025-03-16", "time": "04:00:00Z"}
    assert session_time(RACE_RESULTS, "fp1") == {"date": None, "time": None}
    assert session_time(RACE_RESULTS, "sprint") is None
