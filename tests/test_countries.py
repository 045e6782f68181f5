"""
Unit tests for the factory location lookup
"""

import pytest

from countries import FACTORY_LOCATIONS, Country, resolve
from errors import InvalidArgumentError, InvalidCodeError


class TestResolve:
    """Test factory code to country resolution"""

    def test_shared_france_usa(self):
        assert resolve("SD") == {Country.USA, Country.FRANCE}
        assert resolve("FL") == {Country.FRANCE, Country.USA}
        assert resolve("A0") == {Country.FRANCE, Country.USA}

    def test_single_country_groups(self):
        assert resolve("RC") == {Country.ITALY}
        assert resolve("OL") == {Country.GERMANY}
        assert resolve("DI") == {Country.SWITZERLAND}
        assert resolve("CA") == {Country.SPAIN}
        assert resolve("OS") == {Country.USA}
        assert resolve("VI") == {Country.FRANCE}

    def test_france_spain(self):
        assert resolve("LW") == {Country.FRANCE, Country.SPAIN}

    def test_unknown_code(self):
        with pytest.raises(InvalidCodeError):
            resolve("ZZ")

    def test_lookup_is_case_sensitive(self):
        with pytest.raises(InvalidCodeError):
            resolve("sd")

    def test_blacklisted_code_not_in_table(self):
        with pytest.raises(InvalidCodeError):
            resolve("B9")

    @pytest.mark.parametrize("code", ["", None])
    def test_missing_code(self, code):
        with pytest.raises(InvalidArgumentError):
            resolve(code)


class TestFactoryTable:
    """Test the static factory table"""

    def test_table_size(self):
        assert len(FACTORY_LOCATIONS) == 60

    def test_every_code_is_two_uppercase_characters(self):
        for code in FACTORY_LOCATIONS:
            assert len(code) == 2
            assert code == code.upper()

    def test_every_entry_has_one_or_two_countries(self):
        for countries in FACTORY_LOCATIONS.values():
            assert 1 <= len(countries) <= 2

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            FACTORY_LOCATIONS["ZZ"] = frozenset({Country.USA})
