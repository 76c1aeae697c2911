"""
VIN Input Normalizer
Canonicalizes letter case before validation.
"""
import logging
import string

logger = logging.getLogger(__name__)

# ASCII-only case mapping; str.upper() would turn "ſ" into "S" or "ﬆ" into "ST"
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class VinNormalizer:
    """
    Uppercases raw VIN input.

    Nothing is trimmed or stripped: whitespace, dashes and any other
    separators are left in place so that the validator rejects them.
    Non-ASCII characters are left as they are.
    """

    def normalize(self, raw: str) -> str:
        """Return an ASCII-uppercased copy of ``raw``. Non-strings pass through untouched."""
        if not isinstance(raw, str):
            return raw
        return raw.translate(_ASCII_UPPER)


# Singleton
_normalizer: VinNormalizer | None = None

def get_normalizer() -> VinNormalizer:
    global _normalizer
    if _normalizer is None:
        _normalizer = VinNormalizer()
    return _normalizer
