"""
VIN Reference Tables
Static lookup data for WMI geography, manufacturers and model-year codes (ISO 3779 / ISO 3780).

Every table is built once at import time and exposed read-only.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping

# Characters permitted anywhere in a VIN (I, O and Q are never used)
VIN_ALPHABET = "0123456789ABCDEFGHJKLMNPRSTUVWXYZ"
VIN_CHAR_CLASS = f"[{VIN_ALPHABET}]"

# Second-character key that covers the whole alphabet
_ANY = "ABCDEFGHJKLMNPRSTUVWXYZ0123456789"


@dataclass(frozen=True)
class RegionEntry:
    """A WMI region and its ordered country table."""
    name: str
    countries: Mapping[str, str]  # character-set key -> country, order matters


# --- Region / Country Table ---
# Keyed by WMI[0]. Country keys are plain character sets tested against WMI[1];
# the first key containing the character wins, so authored order is significant.

_REGIONS: Dict[str, Dict] = {
    # Africa
    "A": {"region": "Africa", "countries": {
        "ABCDEFGH": "South Africa",
        "JKLMN": "Ivory Coast",
    }},
    "B": {"region": "Africa", "countries": {
        "ABCDE": "Angola",
        "FGHJK": "Kenya",
        "LMNPR": "Tanzania",
    }},
    "C": {"region": "Africa", "countries": {
        "ABCDE": "Benin",
        "FGHJK": "Madagascar",
        "LMNPR": "Tunisia",
    }},
    "D": {"region": "Africa", "countries": {
        "ABCDE": "Egypt",
        "FGHJK": "Morocco",
        "LMNPR": "Zambia",
    }},
    "E": {"region": "Africa", "countries": {
        "ABCDE": "Ethiopia",
        "FGHJK": "Mozambique",
    }},
    "F": {"region": "Africa", "countries": {
        "ABCDE": "Ghana",
        "FGHJK": "Nigeria",
    }},
    "G": {"region": "Africa", "countries": {}},
    "H": {"region": "Africa", "countries": {}},

    # Asia
    "J": {"region": "Asia", "countries": {
        _ANY: "Japan",
    }},
    "K": {"region": "Asia", "countries": {
        "ABCDE": "Sri Lanka",
        "FGHJK": "Israel",
        "LMNPR": "South Korea",
        "STUVWXYZ0123456789": "Kazakhstan",
    }},
    "L": {"region": "Asia", "countries": {
        _ANY: "China",
    }},
    "M": {"region": "Asia", "countries": {
        "ABCDE": "India",
        "FGHJK": "Indonesia",
        "LMNPR": "Thailand",
        "STUVW": "Myanmar",
    }},
    "N": {"region": "Asia", "countries": {
        "ABCDE": "Iran",
        "FGHJK": "Pakistan",
        "LMNPR": "Turkey",
    }},
    "P": {"region": "Asia", "countries": {
        "ABCDE": "Philippines",
        "FGHJK": "Singapore",
        "LMNPR": "Malaysia",
    }},
    "R": {"region": "Asia", "countries": {
        "ABCDE": "United Arab Emirates",
        "FGHJK": "Taiwan",
        "LMNPR": "Vietnam",
        "STUVW": "Saudi Arabia",
    }},

    # Europe
    "S": {"region": "Europe", "countries": {
        "ABCDEFGHJKLM": "United Kingdom",
        "NPRST": "Germany",
        "UVWXYZ": "Poland",
        "1234": "Latvia",
    }},
    "T": {"region": "Europe", "countries": {
        "ABCDEFGH": "Switzerland",
        "JKLMNP": "Czech Republic",
        "RSTUV": "Hungary",
        "WXYZ1": "Portugal",
    }},
    "U": {"region": "Europe", "countries": {
        "HJKLM": "Denmark",
        "NPRST": "Ireland",
        "UVWXYZ": "Romania",
        "567": "Slovakia",
    }},
    "V": {"region": "Europe", "countries": {
        "ABCDE": "Austria",
        "FGHJKLMNPR": "France",
        "STUVW": "Spain",
        "XYZ12": "Serbia",
        "345": "Croatia",
        "67890": "Estonia",
    }},
    "W": {"region": "Europe", "countries": {
        _ANY: "Germany",
    }},
    "X": {"region": "Europe", "countries": {
        "ABCDE": "Bulgaria",
        "FGHJK": "Greece",
        "LMNPR": "Netherlands",
        "STUVW": "Russia",
        "XYZ12": "Luxembourg",
        "34567890": "Russia",
    }},
    "Y": {"region": "Europe", "countries": {
        "ABCDE": "Belgium",
        "FGHJK": "Finland",
        "LMNPR": "Malta",
        "STUVW": "Sweden",
        "XYZ12": "Norway",
        "345": "Belarus",
        "67890": "Ukraine",
    }},
    "Z": {"region": "Europe", "countries": {
        "ABCDEFGHJKLMNPR": "Italy",
        "XYZ12": "Slovenia",
        "345": "Lithuania",
    }},

    # North America
    "1": {"region": "North America", "countries": {
        _ANY: "United States",
    }},
    "2": {"region": "North America", "countries": {
        _ANY: "Canada",
    }},
    "3": {"region": "North America", "countries": {
        "ABCDEFGHJKLMNPRSTUVW": "Mexico",
        "XYZ1234567": "Costa Rica",
        "890": "Cayman Islands",
    }},
    "4": {"region": "North America", "countries": {
        _ANY: "United States",
    }},
    "5": {"region": "North America", "countries": {
        _ANY: "United States",
    }},

    # Oceania
    "6": {"region": "Oceania", "countries": {
        "ABCDEFGHJKLMNPRSTUVW": "Australia",
    }},
    "7": {"region": "Oceania", "countries": {
        "ABCDE": "New Zealand",
    }},

    # South America
    "8": {"region": "South America", "countries": {
        "ABCDE": "Argentina",
        "FGHJK": "Chile",
        "LMNPR": "Ecuador",
        "STUVW": "Peru",
        "XYZ12": "Venezuela",
    }},
    "9": {"region": "South America", "countries": {
        "ABCDE": "Brazil",
        "FGHJK": "Colombia",
        "LMNPR": "Paraguay",
        "STUVW": "Uruguay",
        "XYZ12": "Trinidad & Tobago",
        "3456789": "Brazil",
    }},
}


# --- Manufacturer Table ---
# Exact 3-character WMIs first; 2-character prefixes act as a fallback for
# WMIs that have no exact entry.

_MANUFACTURERS: Dict[str, str] = {
    # North America
    "1B3": "Dodge",
    "1C3": "Chrysler",
    "1C4": "Jeep",
    "1C6": "Ram",
    "1FA": "Ford",
    "1FM": "Ford",
    "1FT": "Ford",
    "1G1": "Chevrolet",
    "1G4": "Buick",
    "1G6": "Cadillac",
    "1GC": "Chevrolet",
    "1GT": "GMC",
    "1HG": "Honda",
    "1J4": "Jeep",
    "1LN": "Lincoln",
    "1N4": "Nissan",
    "19U": "Acura",
    "19X": "Honda",
    "2FA": "Ford",
    "2G1": "Chevrolet",
    "2HG": "Honda",
    "2HM": "Hyundai",
    "2T1": "Toyota",
    "3FA": "Ford",
    "3G1": "Chevrolet",
    "3HG": "Honda",
    "3MZ": "Mazda",
    "3N1": "Nissan",
    "3VW": "Volkswagen",
    "4S3": "Subaru",
    "4T1": "Toyota",
    "4US": "BMW",
    "5FN": "Honda",
    "5NP": "Hyundai",
    "5TD": "Toyota",
    "5UX": "BMW",
    "5XY": "Kia",
    "5YJ": "Tesla",
    "7SA": "Tesla",

    # Asia
    "JA3": "Mitsubishi",
    "JF1": "Subaru",
    "JF2": "Subaru",
    "JH4": "Acura",
    "JHM": "Honda",
    "JM1": "Mazda",
    "JN1": "Nissan",
    "JN8": "Nissan",
    "JNK": "Infiniti",
    "JS3": "Suzuki",
    "JT2": "Toyota",
    "JTD": "Toyota",
    "JTH": "Lexus",
    "JTJ": "Lexus",
    "KL7": "Chevrolet",
    "KM8": "Hyundai",
    "KMH": "Hyundai",
    "KMT": "Genesis",
    "KNA": "Kia",
    "KND": "Kia",
    "LFV": "FAW-Volkswagen",
    "LRW": "Tesla",
    "LSV": "SAIC Volkswagen",
    "MA1": "Mahindra",
    "MA3": "Suzuki",
    "MAT": "Tata",
    "MBH": "Suzuki",
    "MBJ": "Toyota",
    "MRH": "Honda",
    "NM0": "Ford",

    # Europe
    "SAJ": "Jaguar",
    "SAL": "Land Rover",
    "SCC": "Lotus",
    "SCF": "Aston Martin",
    "SHH": "Honda",
    "SJN": "Nissan",
    "TMB": "Skoda",
    "TRU": "Audi",
    "VF1": "Renault",
    "VF3": "Peugeot",
    "VF7": "Citroen",
    "VSS": "SEAT",
    "WAU": "Audi",
    "WBA": "BMW",
    "WBS": "BMW M",
    "WBY": "BMW i",
    "WDB": "Mercedes-Benz",
    "WDC": "Mercedes-Benz",
    "WDD": "Mercedes-Benz",
    "WF0": "Ford Germany",
    "WME": "Smart",
    "WMW": "MINI",
    "WP0": "Porsche",
    "WP1": "Porsche",
    "WUA": "Audi Sport",
    "WVG": "Volkswagen",
    "WVW": "Volkswagen",
    "WV1": "Volkswagen Commercial Vehicles",
    "WV2": "Volkswagen Commercial Vehicles",
    "YS3": "Saab",
    "YV1": "Volvo",
    "YV4": "Volvo",
    "ZAR": "Alfa Romeo",
    "ZFA": "Fiat",
    "ZFF": "Ferrari",
    "ZHW": "Lamborghini",

    # Oceania / South America
    "6FP": "Ford Australia",
    "6G1": "Holden",
    "8AP": "Fiat Argentina",
    "9BW": "Volkswagen Brazil",

    # Prefix fallbacks
    "1G": "General Motors",
    "2G": "General Motors",
    "3G": "General Motors",
    "JT": "Toyota",
    "KN": "Kia",
    "KM": "Hyundai",
    "SA": "Jaguar Land Rover",
    "VF": "Stellantis France",
    "WD": "Daimler",
    "WV": "Volkswagen",
    "ZF": "Fiat",
}


# --- Model Year Table ---
# Position 10 repeats every 30 years; I, O, Q, U, Z and 0 are never used.

YEAR_CYCLE = "ABCDEFGHJKLMNPRSTVWXY123456789"
FIRST_MODEL_YEAR = 1980
LAST_MODEL_YEAR = 2069

_YEARS: Dict[int, str] = {
    year: YEAR_CYCLE[(year - FIRST_MODEL_YEAR) % len(YEAR_CYCLE)]
    for year in range(FIRST_MODEL_YEAR, LAST_MODEL_YEAR + 1)
}


def _freeze_regions(regions: Dict[str, Dict]) -> Mapping[str, RegionEntry]:
    return MappingProxyType({
        key: RegionEntry(
            name=value["region"],
            countries=MappingProxyType(dict(value["countries"])),
        )
        for key, value in regions.items()
    })


# --- Public read-only views ---

REGIONS: Mapping[str, RegionEntry] = _freeze_regions(_REGIONS)
MANUFACTURERS: Mapping[str, str] = MappingProxyType(_MANUFACTURERS)
YEARS: Mapping[int, str] = MappingProxyType(_YEARS)


def build_region_table(regions: Dict[str, Dict]) -> Mapping[str, RegionEntry]:
    """
    Build a read-only region table from plain dicts.

    Accepts the same shape as the bundled data:
    ``{"W": {"region": "Europe", "countries": {"ABC": "Germany"}}}``.
    Country order is preserved.
    """
    return _freeze_regions(regions)
