# encoders.py
# Date Code Finder – date code generators for the four historical eras

"""
Each era has a component encoder (year, month or week, factory code) and a
calendar-date adapter. Most adapters only break a date into components and
hand them to the component encoder, so both input shapes produce the same
code for the same manufacturing date. The 1990-2006 era stamps dates with
its own interleaved layout instead.

Encoding never looks a factory up in the country table; only decoding does.
"""

from datetime import date

from errors import FormatError, InvalidArgumentError, InvalidCodeError, OutOfRangeError

BLACKLISTED_FACTORY_CODE = "b9"

# (computed week, calendar year) pairs that RC attributes to the previous year
_RC_WEEK_CORRECTIONS = {(53, 2016), (52, 2017)}


# -------------------------------
# Validation helpers
# -------------------------------

def _check_number(field, value, low, high):
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(value, f"manufacturing {field} must be an integer")
    if not low <= value <= high:
        raise OutOfRangeError(field, value, f"{low}-{high}")
    return value


def _check_post2007_year(year):
    _check_number("year", year, 2007, 2099)
    if 2017 <= year <= 2019:
        raise OutOfRangeError("year", year, "2007-2016 or 2020-2099")
    return year


def check_factory_code(code):
    """Validate a factory location code's shape and return it uppercased."""
    if not code:
        raise InvalidArgumentError("factory location code")
    if not isinstance(code, str):
        raise FormatError(code, "factory location code must be a string")
    if len(code) != 2 or not code.isascii() or not code[0].isalpha() or not code[1].isalnum():
        raise FormatError(code, "factory location code must be a letter followed by a letter or digit")
    if code.lower() == BLACKLISTED_FACTORY_CODE:
        raise InvalidCodeError(code, "blacklisted")
    return code.upper()


def _check_date(manufacturing_date):
    if manufacturing_date is None:
        raise InvalidArgumentError("manufacturing date")
    if not isinstance(manufacturing_date, date):
        raise FormatError(manufacturing_date, "manufacturing date must be a date")
    return manufacturing_date


def _interleave(factory, period, year):
    # FACTORY + period tens + year tens + period units + year units
    return f"{factory}{period // 10}{year // 10 % 10}{period % 10}{year % 10}"


def week_of_year(day):
    """Week number with weeks starting Monday and week 1 holding the first four-day week.

    Unlike ISO 8601, late-December days never roll over into week 1 of the
    next year; they stay in week 53 of their calendar year.
    """
    week = day.isocalendar()[1]
    if day.month == 12 and week == 1:
        return 53
    return week


# -------------------------------
# Early 1980s: YYM / YYMM
# -------------------------------

def encode_early1980(year, month):
    """Encode an early-1980s code: year within century followed by the month, unpadded."""
    _check_number("year", year, 1980, 1989)
    _check_number("month", month, 1, 12)
    return f"{year % 100}{month}"


def encode_early1980_from_date(manufacturing_date):
    day = _check_date(manufacturing_date)
    return encode_early1980(day.year, day.month)


# -------------------------------
# Late 1980s: YYM[M] + FACTORY
# -------------------------------

def encode_late1980(factory_code, year, month):
    """Encode a late-1980s code: two-digit year, month, then the factory code."""
    _check_number("year", year, 1980, 1989)
    _check_number("month", month, 1, 12)
    factory = check_factory_code(factory_code)
    return f"{year % 100:02d}{month}{factory}"


def encode_late1980_from_date(factory_code, manufacturing_date):
    day = _check_date(manufacturing_date)
    return encode_late1980(factory_code, day.year, day.month)


# -------------------------------
# 1990 to 2006: two component layouts, one date layout
# -------------------------------

def encode_1990(factory_code, year, month):
    """Encode a 1990-2006 code from components.

    Months 1-9:   FACTORY + (y-1900)%5 + (y-1900)//10 + month + (y-1900)%10,
                  e.g. FL 1993-05 -> FL3953. Only 1990-1999 keep (y-1900)//10
                  to a single digit.
    Months 10-12: FACTORY + month//10 + (y-2000)//10 + month%10 + y%100,
                  e.g. SD 2003-10 -> SD1003. Only 2000-2006 keep (y-2000)
                  non-negative.
    """
    _check_number("year", year, 1990, 2006)
    _check_number("month", month, 1, 12)
    factory = check_factory_code(factory_code)

    if month < 10:
        if year >= 2000:
            raise OutOfRangeError("year", year, "1990-1999 for months 1-9")
        offset = year - 1900
        return f"{factory}{offset % 5}{offset // 10}{month}{offset % 10}"

    if year < 2000:
        raise OutOfRangeError("year", year, "2000-2006 for months 10-12")
    return f"{factory}{month // 10}{(year - 2000) // 10}{month % 10}{year % 100}"


def encode_1990_from_date(factory_code, manufacturing_date):
    """Encode a 1990-2006 code from a date: FACTORY + month and year digits interleaved.

    Agrees with encode_1990 for 1990 and 1995 with months 1-9 and for every
    2000-2006 month from 10 on; elsewhere the two layouts differ.
    """
    day = _check_date(manufacturing_date)
    _check_number("year", day.year, 1990, 2006)
    factory = check_factory_code(factory_code)
    return _interleave(factory, day.month, day.year)


# -------------------------------
# 2007 onwards: FACTORY + week and year digits interleaved
# -------------------------------

def encode_post2007(factory_code, year, week):
    """Encode a post-2007 code from a year and week number (1-53)."""
    _check_post2007_year(year)
    _check_number("week", week, 1, 53)
    factory = check_factory_code(factory_code)
    return _interleave(factory, week, year)


def encode_post2007_from_date(factory_code, manufacturing_date):
    """Encode a post-2007 code from a calendar date.

    RC stamped its 2016 week 53 and 2017 week 52 with the previous year.
    """
    day = _check_date(manufacturing_date)
    if day.year < 2007:
        raise OutOfRangeError("year", day.year, "2007 onwards")
    factory = check_factory_code(factory_code)

    week = week_of_year(day)
    year = day.year
    if factory == "RC" and (week, year) in _RC_WEEK_CORRECTIONS:
        year -= 1
    return encode_post2007(factory, year, week)
