"""
VIN Decoding Pipeline
Orchestrates normalization, validation, and the WMI/VIS lookups into a VinRecord.
"""
from typing import Optional
import logging

from .config import config
from .core.errors import InvalidFormat
from .core.schemas import VinRecord
from .observability import log_decode_event
from .services.normalizer import VinNormalizer, get_normalizer
from .services.validator import VinValidator, get_validator
from .services.geography import (
    RegionResolver,
    CountryResolver,
    get_region_resolver,
    get_country_resolver,
)
from .services.manufacturer import ManufacturerResolver, get_manufacturer_resolver
from .services.model_year import (
    CurrentYearSource,
    ModelYearResolver,
    fixed_current_year,
    get_model_year_resolver,
    system_current_year,
)

logger = logging.getLogger(__name__)


class VinDecoder:
    """
    Main decoding pipeline.
    raw string → normalize → validate/segment → region, country, manufacturer, model years.

    Only validation can fail. Every lookup after it is total and reports a
    miss as None (or an empty tuple of years).
    """

    def __init__(
        self,
        normalizer: Optional[VinNormalizer] = None,
        validator: Optional[VinValidator] = None,
        region_resolver: Optional[RegionResolver] = None,
        country_resolver: Optional[CountryResolver] = None,
        manufacturer_resolver: Optional[ManufacturerResolver] = None,
        year_resolver: Optional[ModelYearResolver] = None,
        current_year: Optional[CurrentYearSource] = None,
    ):
        self.normalizer = normalizer or get_normalizer()
        self.validator = validator or get_validator()
        self.region_resolver = region_resolver or get_region_resolver()
        self.country_resolver = country_resolver or get_country_resolver()
        self.manufacturer_resolver = manufacturer_resolver or get_manufacturer_resolver()
        self.year_resolver = year_resolver or get_model_year_resolver()
        self.current_year = current_year or system_current_year

    def decode(self, raw: str) -> VinRecord:
        """
        Decode a raw VIN string.

        Raises:
            InvalidFormat: if the uppercased input is not a structurally valid VIN
        """
        # Step 1: Normalize case
        value = self.normalizer.normalize(raw)

        # Step 2: Single validation gate
        try:
            segments = self.validator.segment(value)
        except InvalidFormat:
            logger.warning(f"Rejected VIN input: {value!r}", extra={"vin": value})
            raise

        # Step 3: Lookups. The clock is read once so the record is fixed at construction.
        wmi = segments.wmi
        year = self.current_year()

        record = VinRecord(
            vin=segments.vin,
            wmi=wmi,
            vds=segments.vds,
            vis=segments.vis,
            region=self.region_resolver.resolve(wmi),
            country=self.country_resolver.resolve(wmi),
            manufacturer=self.manufacturer_resolver.resolve(wmi),
            model_years=self.year_resolver.resolve(segments.vis, year),
        )

        log_decode_event(
            vin=record.vin,
            status="DECODED",
            region=record.region,
            country=record.country,
            manufacturer=record.manufacturer,
            model_years=list(record.model_years),
            current_year=year,
        )
        return record

    def is_valid(self, raw: str) -> bool:
        """True when ``raw`` would decode without InvalidFormat."""
        return self.validator.is_valid(self.normalizer.normalize(raw))


def create_decoder(reference_year: Optional[int] = None) -> VinDecoder:
    """
    Create a new decoder instance.

    Args:
        reference_year: Pin the current year (falls back to config, then the clock)
    """
    year = reference_year if reference_year is not None else config.REFERENCE_YEAR
    source = fixed_current_year(year) if year is not None else system_current_year
    return VinDecoder(current_year=source)


# Singleton
_decoder: VinDecoder | None = None

def get_decoder() -> VinDecoder:
    global _decoder
    if _decoder is None:
        _decoder = create_decoder()
    return _decoder


def parse_vin(raw: str) -> VinRecord:
    """Parse and fully decode a VIN. Raises InvalidFormat on bad input."""
    return get_decoder().decode(raw)


def is_valid_vin(raw: str) -> bool:
    """Check a VIN's structure without raising."""
    return get_decoder().is_valid(raw)
