# countries.py
# Date Code Finder – factory location code to country lookup

from enum import Enum
from types import MappingProxyType

from errors import InvalidArgumentError, InvalidCodeError


class Country(Enum):
    FRANCE = "France"
    SPAIN = "Spain"
    GERMANY = "Germany"
    ITALY = "Italy"
    SWITZERLAND = "Switzerland"
    USA = "USA"


# -------------------------------
# Factory groups: one entry per distinct country set
# -------------------------------
_FACTORY_GROUPS = [
    (
        ("A0", "A1", "A2", "AA", "AH", "AN", "AR", "AS", "BA", "BJ",
         "BU", "DR", "DU", "DT", "CO", "CT", "CX", "ET", "FL"),
        (Country.FRANCE, Country.USA),
    ),
    (("LW",), (Country.FRANCE, Country.SPAIN)),
    (
        ("MB", "MI", "NO", "RA", "RI", "SF", "SL", "SN", "SP", "SR",
         "TJ", "TH", "TR", "TS", "VI", "VX"),
        (Country.FRANCE,),
    ),
    (("LP", "OL"), (Country.GERMANY,)),
    (
        ("BC", "BO", "CE", "FO", "MA", "OB", "RC", "RE", "SA", "TD"),
        (Country.ITALY,),
    ),
    (("CA", "LO", "LB", "LM", "GI"), (Country.SPAIN,)),
    (("DI", "FA"), (Country.SWITZERLAND,)),
    (("FC", "FH", "LA", "OS"), (Country.USA,)),
    (("SD",), (Country.USA, Country.FRANCE)),
]

FACTORY_LOCATIONS = MappingProxyType({
    code: frozenset(countries)
    for codes, countries in _FACTORY_GROUPS
    for code in codes
})


def resolve(code):
    """Return the frozenset of countries a factory location code may refer to.

    The lookup is an exact match; callers uppercase codes first.
    """
    if not code:
        raise InvalidArgumentError("factory location code")

    countries = FACTORY_LOCATIONS.get(code)
    if countries is None:
        raise InvalidCodeError(code, "not a known factory location")
    return countries
