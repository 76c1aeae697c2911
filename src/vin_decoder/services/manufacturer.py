"""
Manufacturer Resolver
Maps a WMI to a manufacturer name.
"""
from typing import Mapping, Optional

from ..core.reference import MANUFACTURERS


class ManufacturerResolver:
    """
    Exact 3-character WMI match first, then the 2-character prefix.

    Without an exact entry, every WMI sharing a prefix resolves to the
    prefix's name.
    """

    def __init__(self, manufacturers: Optional[Mapping[str, str]] = None):
        self.manufacturers = MANUFACTURERS if manufacturers is None else manufacturers

    def resolve(self, wmi: str) -> Optional[str]:
        name = self.manufacturers.get(wmi)
        if name is not None:
            return name
        return self.manufacturers.get(wmi[:2])


# Singleton
_resolver: ManufacturerResolver | None = None

def get_manufacturer_resolver() -> ManufacturerResolver:
    global _resolver
    if _resolver is None:
        _resolver = ManufacturerResolver()
    return _resolver
