"""Team display metadata keyed by F1 API team id"""

TEAM_CONFIG = {
    "mclaren": {"name": "McLaren", "color": "#FF8000", "secondary": "#47C7FC"},
    "mercedes": {"name": "Mercedes", "color": "#00D2BE", "secondary": "#000000"},
    "red_bull": {"name": "Red Bull Racing", "color": "#0600EF", "secondary": "#FF0000"},
    "ferrari": {"name": "Ferrari", "color": "#DC0000", "secondary": "#FFFFFF"},
    "aston_martin": {"name": "Aston Martin", "color": "#006F62", "secondary": "#00594F"},
    "alpine": {"name": "Alpine", "color": "#0090FF", "secondary": "#FF00C7"},
    "williams": {"name": "Williams", "color": "#005AFF", "secondary": "#FFFFFF"},
    "haas": {"name": "Haas F1 Team", "color": "#FFFFFF", "secondary": "#D00000"},
    "sauber": {"name": "Sauber", "color": "#52E252", "secondary": "#000000"},
    "rb": {"name": "Racing Bulls", "color": "#6692FF", "secondary": "#00293C"},
    # retired names still returned for older seasons
    "alpha_tauri": {"name": "AlphaTauri", "color": "#2B4562", "secondary": "#FFFFFF"},
    "alfa_romeo": {"name": "Alfa Romeo", "color": "#900000", "secondary": "#FFFFFF"},
}

DEFAULT_TEAM = {"name": "F1 Team", "color": "#DC2626", "secondary": "#FFFFFF"}


def team_key(team_id) -> str:
    if not team_id:
        return ""
    return "".join(str(team_id).lower().split())


def get_team_config(team_id) -> dict:
    return TEAM_CONFIG.get(team_key(team_id), DEFAULT_TEAM)


def get_team_color(team_id) -> str:
    return get_team_config(team_id)["color"]
