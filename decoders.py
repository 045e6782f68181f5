# decoders.py
# Date Code Finder – date code parsers for the four historical eras

from typing import FrozenSet, NamedTuple

from countries import Country, resolve
from errors import FormatError, InvalidArgumentError, OutOfRangeError


# -------------------------------
# Results
# -------------------------------

class Early1980Date(NamedTuple):
    year: int
    month: int

    @property
    def manufacture_date(self):
        return f"{self.month:02d}/{self.year}"


class Late1980Date(NamedTuple):
    factory_code: str
    year: int
    month: int
    countries: FrozenSet[Country]

    @property
    def manufacture_date(self):
        return f"{self.month:02d}/{self.year}"


class Date1990(NamedTuple):
    factory_code: str
    year: int
    month: int
    countries: FrozenSet[Country]

    @property
    def manufacture_date(self):
        return f"{self.month:02d}/{self.year}"


class Date2007(NamedTuple):
    factory_code: str
    year: int
    week: int
    countries: FrozenSet[Country]

    @property
    def manufacture_date(self):
        return f"Week {self.week}, {self.year}"


# -------------------------------
# Helpers
# -------------------------------

def _prepare(date_code):
    if not date_code:
        raise InvalidArgumentError("date code")
    if not isinstance(date_code, str):
        raise FormatError(date_code, "date code must be a string")
    if not (date_code.isascii() and date_code.isalnum()):
        raise FormatError(date_code, "only letters and digits are allowed")
    return date_code.upper()


def _check_length(code, low, high):
    if not low <= len(code) <= high:
        expected = str(low) if low == high else f"{low}-{high}"
        raise FormatError(code, f"expected {expected} characters, got {len(code)}")


def _parse(field, text, code):
    if not text.isdigit():
        raise FormatError(code, f"manufacturing {field} {text!r} is not numeric")
    return int(text)


def _check_range(field, value, low, high):
    if not low <= value <= high:
        raise OutOfRangeError(field, value, f"{low}-{high}")


# -------------------------------
# Era decoders
# -------------------------------

def decode_early1980(date_code):
    """Decode an early-1980s code (YYM or YYMM, no factory)."""
    code = _prepare(date_code)
    _check_length(code, 3, 4)

    year = _parse("year", "19" + code[:2], code)
    month = _parse("month", code[2:], code)
    _check_range("month", month, 1, 12)
    _check_range("year", year, 1980, 1989)

    return Early1980Date(year, month)


def decode_late1980(date_code):
    """Decode a late-1980s code (YYM[M] followed by a two-letter factory code)."""
    code = _prepare(date_code)
    _check_length(code, 5, 6)

    factory_code = code[-2:]
    year = _parse("year", "19" + code[:2], code)
    month = _parse("month", code[2:-2], code)
    _check_range("month", month, 1, 12)
    _check_range("year", year, 1980, 1989)

    return Late1980Date(factory_code, year, month, resolve(factory_code))


def decode_1990(date_code):
    """Decode a 1990-2006 code.

    Layout is FACTORY + month tens + year tens + month units + year units.
    Factory codes starting with S or V carry a 20xx year, all others 19xx.
    """
    code = _prepare(date_code)
    _check_length(code, 5, 6)
    if code[1] == "0":
        raise FormatError(code, "second character must not be 0")
    if len(code) < 6:
        raise FormatError(code, "missing the last year digit")

    factory_code = code[:2]
    century = "20" if code[0] in ("S", "V") else "19"
    year = _parse("year", century + code[3] + code[5], code)
    month = _parse("month", code[2] + code[4], code)
    _check_range("month", month, 1, 12)
    _check_range("year", year, 1990, 2006)

    return Date1990(factory_code, year, month, resolve(factory_code))


def decode_post2007(date_code):
    """Decode a post-2007 code (FACTORY + week and year digits interleaved)."""
    code = _prepare(date_code)
    _check_length(code, 6, 6)
    # R-factories other than RC never used this layout; RI0017 is a known exception
    if (code[0] == "R" and code[1] != "C") != (code == "RI0017"):
        raise FormatError(code, "not a post-2007 factory prefix")

    factory_code = code[:2]
    year = _parse("year", "20" + code[3] + code[5], code)
    week = _parse("week", code[2] + code[4], code)
    if week > 53:
        raise OutOfRangeError("week", week, "0-53")
    if year < 2007:
        raise OutOfRangeError("year", year, "2007 onwards")

    return Date2007(factory_code, year, week, resolve(factory_code))


# -------------------------------
# Dispatcher
# -------------------------------

ERAS = {
    "early1980": ("Early 1980s (YYM)", decode_early1980),
    "late1980": ("Late 1980s (YYM + factory)", decode_late1980),
    "1990": ("1990 to 2006 (factory + MYMY)", decode_1990),
    "2007": ("2007 onwards (factory + WYWY)", decode_post2007),
}


def decode_date_code(date_code, era):
    """Decode a date code using the rules of the given era key."""
    if era not in ERAS:
        raise InvalidArgumentError("era", f"{era!r} is not one of {', '.join(ERAS)}")
    _, decoder = ERAS[era]
    return decoder(date_code)
