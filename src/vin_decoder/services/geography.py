"""
WMI Geography Resolvers
Maps the first two WMI characters to a region and a country.
"""
from typing import Mapping, Optional

from ..core.reference import REGIONS, RegionEntry


class RegionResolver:
    """Region lookup keyed by WMI[0]."""

    def __init__(self, regions: Optional[Mapping[str, RegionEntry]] = None):
        self.regions = REGIONS if regions is None else regions

    def resolve(self, wmi: str) -> Optional[str]:
        """Return the region name, or None when WMI[0] is not in the table."""
        entry = self.regions.get(wmi[0])
        if entry is None:
            return None
        return entry.name


class CountryResolver:
    """
    Country lookup keyed by WMI[0] then WMI[1].

    Each region carries an ordered table of character-set keys. A key is
    just a bag of single characters (``"ABCDE"``, ``"1234"``); it is never
    read as a regex or a numeric range. Keys may overlap: the first key in
    table order that contains WMI[1] decides the country.
    """

    def __init__(self, regions: Optional[Mapping[str, RegionEntry]] = None):
        self.regions = REGIONS if regions is None else regions

    def resolve(self, wmi: str) -> Optional[str]:
        """Return the country name, or None when nothing matches."""
        entry = self.regions.get(wmi[0])
        if entry is None:
            return None

        second = wmi[1]
        for chars, country in entry.countries.items():
            if second in chars:
                return country

        return None


# Singletons
_region_resolver: RegionResolver | None = None
_country_resolver: CountryResolver | None = None

def get_region_resolver() -> RegionResolver:
    global _region_resolver
    if _region_resolver is None:
        _region_resolver = RegionResolver()
    return _region_resolver

def get_country_resolver() -> CountryResolver:
    global _country_resolver
    if _country_resolver is None:
        _country_resolver = CountryResolver()
    return _country_resolver
