"""
Input normalization for destinations and the home address
"""

from typing import Iterable, List, Optional

from .models import normalize_place

DEFAULT_HOME = "College Park MD"

DEFAULT_CITIES = [
    "Washington DC",
    "Arlington VA",
    "Alexandria VA",
    "Bethesda MD",
    "Silver Spring MD",
    "Rockville MD",
    "Gaithersburg MD",
    "Germantown MD",
    "Columbia MD",
    "Laurel MD",
    "Bowie MD",
    "Greenbelt MD",
    "Hyattsville MD",
    "Annapolis MD",
    "Baltimore MD",
    "Towson MD",
    "Frederick MD",
    "Waldorf MD",
    "Upper Marlboro MD",
    "Fairfax VA",
    "Falls Church VA",
    "McLean VA",
    "Tysons VA",
    "Reston VA",
    "Herndon VA",
    "Vienna VA",
    "Springfield VA",
    "Woodbridge VA",
    "Leesburg VA",
]


def normalize_cities(cities: Optional[Iterable[str]] = None) -> List[str]:
    """
    Normalize destinations, substituting the demo list when none are given

    Raises:
        ValueError: If cities were given but every name is blank
    """
    if not cities:
        cities = DEFAULT_CITIES
    cities = [c for c in cities if c and c.strip()]
    if not cities:
        raise ValueError("Every destination city given is blank")
    return [normalize_place(city) for city in cities]


def normalize_home(home: Optional[str] = None) -> str:
    """Normalize the home address, substituting the demo address when absent"""
    if not home or not home.strip():
        home = DEFAULT_HOME
    return normalize_place(home)
