"""Unit tests for reference.py"""
import pytest
from vin_decoder.core.reference import (
    REGIONS,
    MANUFACTURERS,
    YEARS,
    YEAR_CYCLE,
    VIN_ALPHABET,
    FIRST_MODEL_YEAR,
    LAST_MODEL_YEAR,
    build_region_table,
)


class TestRegionTable:
    """Verify the region/country data is well formed."""

    def test_region_names(self):
        names = {entry.name for entry in REGIONS.values()}
        assert names == {"Africa", "Asia", "Europe", "North America", "Oceania", "South America"}

    def test_region_ranges(self):
        assert REGIONS["A"].name == "Africa"
        assert REGIONS["J"].name == "Asia"
        assert REGIONS["W"].name == "Europe"
        assert REGIONS["1"].name == "North America"
        assert REGIONS["6"].name == "Oceania"
        assert REGIONS["9"].name == "South America"

    def test_keys_use_vin_alphabet(self):
        for first, entry in REGIONS.items():
            assert first in VIN_ALPHABET
            for chars in entry.countries:
                assert set(chars) <= set(VIN_ALPHABET), (first, chars)

    def test_unassigned_first_characters(self):
        assert "0" not in REGIONS
        assert "S" in REGIONS

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            REGIONS["0"] = None
        with pytest.raises(TypeError):
            REGIONS["W"].countries["A"] = "Nowhere"
        with pytest.raises(TypeError):
            MANUFACTURERS["XXX"] = "Nobody"

    def test_build_preserves_country_order(self):
        table = build_region_table({
            "X": {"region": "Testland", "countries": {"Z": "Last", "A": "First"}},
        })
        assert list(table["X"].countries) == ["Z", "A"]


class TestManufacturerTable:

    def test_keys_are_two_or_three_chars(self):
        for key in MANUFACTURERS:
            assert len(key) in (2, 3), key
            assert set(key) <= set(VIN_ALPHABET), key

    def test_known_entries(self):
        assert MANUFACTURERS["1HG"] == "Honda"
        assert MANUFACTURERS["WBA"] == "BMW"
        assert MANUFACTURERS["1G"] == "General Motors"


class TestYearTable:
    """The model-year alphabet and its 30-year cycle."""

    def test_cycle_has_thirty_characters(self):
        assert len(YEAR_CYCLE) == 30
        assert len(set(YEAR_CYCLE)) == 30

    def test_cycle_excludes_forbidden_characters(self):
        for char in "IOQUZ0":
            assert char not in YEAR_CYCLE

    def test_years_ascending_and_contiguous(self):
        years = list(YEARS)
        assert years == sorted(years)
        assert years[0] == FIRST_MODEL_YEAR
        assert years[-1] == LAST_MODEL_YEAR
        assert years == list(range(FIRST_MODEL_YEAR, LAST_MODEL_YEAR + 1))

    def test_known_codes(self):
        assert YEARS[1980] == "A"
        assert YEARS[2000] == "Y"
        assert YEARS[2001] == "1"
        assert YEARS[2003] == "3"
        assert YEARS[2010] == "A"
        assert YEARS[2026] == "T"

    def test_code_repeats_every_thirty_years(self):
        for year in range(FIRST_MODEL_YEAR, LAST_MODEL_YEAR - 29):
            assert YEARS[year] == YEARS[year + 30]
