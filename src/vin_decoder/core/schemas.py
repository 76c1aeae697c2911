from typing import Dict, Any, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator
from .reference import VIN_CHAR_CLASS

VIN_LENGTH = 17
VIN_FIELD_PATTERN = rf"^{VIN_CHAR_CLASS}{{{VIN_LENGTH}}}$"

# --- Sub-Models ---

class VinSegments(BaseModel):
    """The three canonical VIN sections, split positionally."""
    model_config = ConfigDict(frozen=True)

    wmi: str = Field(..., min_length=3, max_length=3, description="World Manufacturer Identifier, chars 1-3")
    vds: str = Field(..., min_length=6, max_length=6, description="Vehicle Descriptor Section, chars 4-9")
    vis: str = Field(..., min_length=8, max_length=8, description="Vehicle Identifier Section, chars 10-17")

    @property
    def vin(self) -> str:
        return self.wmi + self.vds + self.vis

# --- Main Models ---

class VinRecord(BaseModel):
    """
    Fully decoded VIN.
    Built once by the decoder and never mutated afterwards.
    """
    model_config = ConfigDict(frozen=True)

    vin: str = Field(..., min_length=VIN_LENGTH, max_length=VIN_LENGTH, pattern=VIN_FIELD_PATTERN)
    wmi: str = Field(..., min_length=3, max_length=3)
    vds: str = Field(..., min_length=6, max_length=6)
    vis: str = Field(..., min_length=8, max_length=8)
    region: Optional[str] = None
    country: Optional[str] = None
    manufacturer: Optional[str] = None
    model_years: Tuple[int, ...] = Field(default_factory=tuple, description="Candidate model years, ascending")

    @model_validator(mode='after')
    def check_segments_rebuild_vin(self) -> 'VinRecord':
        """WMI + VDS + VIS must reconstruct the VIN exactly."""
        if self.wmi + self.vds + self.vis != self.vin:
            raise ValueError(
                f"Segments {self.wmi}/{self.vds}/{self.vis} do not rebuild VIN {self.vin}"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Flat key-value export."""
        return {
            "vin": self.vin,
            "wmi": self.wmi,
            "vds": self.vds,
            "vis": self.vis,
            "region": self.region,
            "country": self.country,
            "modelYear": list(self.model_years),
            "manufacturer": self.manufacturer,
        }

    def __str__(self) -> str:
        return self.vin
