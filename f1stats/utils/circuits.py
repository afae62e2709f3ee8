"""
Circuit characteristics

Ratings (0-100) for power sensitivity, downforce requirement, overtaking
difficulty, tire wear, fuel consumption and braking difficulty, keyed by the
short circuit name. Circuits we have no ratings for get an estimate from
their length and corner count.
"""

from typing import Dict, Optional

METRICS = (
    "power_sensitivity",
    "downforce_requirement",
    "overtaking_difficulty",
    "tire_wear",
    "fuel_consumption",
    "braking_difficulty",
)

# name: (power, downforce, overtaking, tires, fuel, braking)
_RATINGS = {
    "Bahrain": (75, 65, 40, 85, 70, 60),
    "Jeddah": (85, 70, 35, 60, 75, 90),
    "Albert Park": (65, 75, 60, 55, 65, 70),
    "Suzuka": (70, 90, 65, 70, 75, 85),
    "Miami": (65, 70, 50, 60, 70, 65),
    "Imola": (60, 80, 80, 65, 65, 75),
    "Monaco": (40, 95, 90, 30, 50, 85),
    "Gilles Villeneuve": (80, 60, 45, 70, 75, 75),
    "Montmelo": (70, 85, 70, 75, 70, 70),
    "Red Bull Ring": (85, 50, 30, 65, 75, 60),
    "Silverstone": (70, 85, 65, 75, 70, 80),
    "Hungaroring": (55, 85, 80, 70, 65, 70),
    "Zandvoort": (60, 80, 70, 60, 65, 75),
    "Spa": (85, 80, 50, 65, 85, 90),
    "Monza": (95, 20, 40, 60, 80, 50),
    "Baku": (80, 65, 35, 50, 70, 80),
    "Marina Bay": (30, 75, 85, 85, 90, 70),
    "Hermanos Rodriguez": (75, 70, 45, 65, 75, 80),
    "Austin": (75, 75, 45, 70, 75, 75),
    "Interlagos": (70, 75, 40, 75, 70, 80),
    "Lusail": (80, 65, 50, 85, 80, 65),
    "Yas Marina": (75, 70, 55, 60, 75, 70),
    "Vegas": (85, 60, 40, 55, 80, 75),
    "Mugello": (70, 85, 75, 80, 75, 85),
    "Portimao": (65, 80, 65, 75, 70, 80),
    "Istanbul": (70, 80, 60, 70, 75, 85),
    "Paul Ricard": (75, 70, 55, 60, 70, 65),
    "Sochi": (70, 65, 50, 55, 70, 60),
    "Nurburgring": (65, 80, 60, 70, 75, 80),
    "Adelaide": (60, 70, 55, 65, 70, 75),
}

CIRCUIT_CHARACTERISTICS: Dict[str, Dict[str, int]] = {
    name: dict(zip(METRICS, values)) for name, values in _RATINGS.items()
}

DEFAULT_CHARACTERISTICS = {
    "power_sensitivity": 70,
    "downforce_requirement": 70,
    "overtaking_difficulty": 60,
    "tire_wear": 65,
    "fuel_consumption": 70,
    "braking_difficulty": 70,
}

# F1 API circuit ids -> keys of CIRCUIT_CHARACTERISTICS
CIRCUIT_NAMES = {
    "bahrein": "Bahrain",
    "jeddah": "Jeddah",
    "albert_park": "Albert Park",
    "suzuka": "Suzuka",
    "miami": "Miami",
    "imola": "Imola",
    "monaco": "Monaco",
    "gilles_villeneuve": "Gilles Villeneuve",
    "montmelo": "Montmelo",
    "red_bull_ring": "Red Bull Ring",
    "silverstone": "Silverstone",
    "hungaroring": "Hungaroring",
    "zandvoort": "Zandvoort",
    "spa": "Spa",
    "monza": "Monza",
    "baku": "Baku",
    "marina_bay": "Marina Bay",
    "hermanos_rodriguez": "Hermanos Rodriguez",
    "austin": "Austin",
    "interlagos": "Interlagos",
    "lusail": "Lusail",
    "yas_marina": "Yas Marina",
    "vegas": "Vegas",
    "mugello": "Mugello",
    "portimao": "Portimao",
    "istanbul": "Istanbul",
    "paul_ricard": "Paul Ricard",
    "sochi": "Sochi",
    "nurburgring": "Nurburgring",
    "adelaide": "Adelaide",
}


def normalize_circuit_name(circuit_id: str) -> str:
    return CIRCUIT_NAMES.get(circuit_id, circuit_id)


def calculate_characteristics(length_m: Optional[int], corners: Optional[int]) -> Dict[str, int]:
    """Estimate from layout: 7 km of track and 25 corners both count as 100"""
    characteristics = dict(DEFAULT_CHARACTERISTICS)
    if length_m and corners:
        characteristics["power_sensitivity"] = min(100, round(length_m / 7000 * 100))
        characteristics["downforce_requirement"] = min(100, round(corners / 25 * 100))
    return characteristics


def get_circuit_characteristics(circuit_id: str, length_m: Optional[int] = None,
                                corners: Optional[int] = None) -> Dict[str, int]:
    known = CIRCUIT_CHARACTERISTICS.get(normalize_circuit_name(circuit_id))
    if known is None:
        return calculate_characteristics(length_m, corners)
    return {**DEFAULT_CHARACTERISTICS, **known}


# =============================================================================
# LABELS
# =============================================================================
def _label(value: int, bands) -> str:
    for threshold, label in bands:
        if value >= threshold:
            return label
    return bands[-1][1]


_LEVEL_BANDS = ((85, "Very High"), (70, "High"), (50, "Medium"), (30, "Low"), (0, "Very Low"))
_DIFFICULTY_BANDS = ((80, "Very Hard"), (65, "Hard"), (45, "Medium"), (25, "Easy"), (0, "Very Easy"))


def power_sensitivity_label(value: int) -> str:
    return _label(value, _LEVEL_BANDS)


def downforce_label(value: int) -> str:
    return _label(value, _LEVEL_BANDS)


def overtaking_label(value: int) -> str:
    return _label(value, _DIFFICULTY_BANDS)


def tire_wear_label(value: int) -> str:
    return _label(value, ((75, "Very High"), (60, "High"), (40, "Medium"), (0, "Low")))


def fuel_label(value: int) -> str:
    return _label(value, ((80, "Very High"), (65, "High"), (45, "Medium"), (0, "Low")))


def braking_label(value: int) -> str:
    return _label(value, _DIFFICULTY_BANDS)


LABELERS = {
    "power_sensitivity": power_sensitivity_label,
    "downforce_requirement": downforce_label,
    "overtaking_difficulty": overtaking_label,
    "tire_wear": tire_wear_label,
    "fuel_consumption": fuel_label,
    "braking_difficulty": braking_label,
}


def describe_circuit(circuit_id: str, length_m: Optional[int] = None,
                     corners: Optional[int] = None) -> Dict[str, Dict]:
    """{metric: {"value": 75, "label": "High"}} for every metric"""
    values = get_circuit_characteristics(circuit_id, length_m, corners)
    return {
        metric: {"value": values[metric], "label": LABELERS[metric](values[metric])}
        for metric in METRICS
    }


def format_circuit_length(length_m: Optional[int]) -> str:
    if not length_m:
        return "N/A"
    return f"{length_m / 1000:.3f} km"


def format_driver_name(driver_id: Optional[str]) -> str:
    """"max_verstappen" -> "Max Verstappen" """
    if not driver_id:
        return "N/A"
    return " ".join(word[:1].upper() + word[1:] for word in driver_id.split("_"))
