"""
VIN Validator / Segmenter
Single validation gate: structural pattern check plus WMI/VDS/VIS split.
"""
import re

from ..core.errors import InvalidFormat
from ..core.reference import VIN_CHAR_CLASS
from ..core.schemas import VinSegments

# ISO 3779: 17 characters, digits and capital letters except I, O and Q
VIN_PATTERN = re.compile(
    rf"^(?P<wmi>{VIN_CHAR_CLASS}{{3}})"
    rf"(?P<vds>{VIN_CHAR_CLASS}{{6}})"
    rf"(?P<vis>{VIN_CHAR_CLASS}{{8}})$"
)


class VinValidator:
    """Validates a normalized VIN and splits it into its sections."""

    def segment(self, value: str) -> VinSegments:
        """
        Match ``value`` against the VIN pattern and split it.

        Args:
            value: Already-uppercased candidate VIN

        Returns:
            VinSegments with wmi (3), vds (6) and vis (8)

        Raises:
            InvalidFormat: wrong length, a disallowed character, or I/O/Q
        """
        if not isinstance(value, str):
            raise InvalidFormat(value)

        # fullmatch so a trailing newline is not accepted by `$`
        match = VIN_PATTERN.fullmatch(value)
        if match is None:
            raise InvalidFormat(value)

        return VinSegments(
            wmi=match.group("wmi"),
            vds=match.group("vds"),
            vis=match.group("vis"),
        )

    def is_valid(self, value: str) -> bool:
        """Non-raising form of ``segment``."""
        return isinstance(value, str) and VIN_PATTERN.fullmatch(value) is not None


# Singleton
_validator: VinValidator | None = None

def get_validator() -> VinValidator:
    global _validator
    if _validator is None:
        _validator = VinValidator()
    return _validator
