"""
Model Year Resolver
Decodes VIS position 1 (VIN position 10) into candidate calendar years.
"""
from datetime import datetime
from typing import Callable, List, Mapping, Optional, Tuple

from ..core.reference import YEARS

# Zero-argument callable returning the current calendar year
CurrentYearSource = Callable[[], int]


def system_current_year() -> int:
    """Current year from the local clock."""
    return datetime.now().year


def fixed_current_year(year: int) -> CurrentYearSource:
    """Year source pinned to ``year``."""
    def source() -> int:
        return year
    return source


class ModelYearResolver:
    """
    Resolves the model-year character against the repeating 30-year table.

    One character stands for several calendar years, so every year up to and
    including next year is returned instead of a single guess.
    """

    def __init__(self, years: Optional[Mapping[int, str]] = None):
        self.years = YEARS if years is None else years

    def resolve(self, vis: str, current_year: int) -> Tuple[int, ...]:
        """
        Args:
            vis: 8-char Vehicle Identifier Section
            current_year: Calendar year the decode happens in

        Returns:
            Matching years in ascending order, possibly empty
        """
        code = vis[0]
        coming_year = current_year + 1
        matches: List[int] = []

        for year in sorted(self.years):
            if self.years[year] == code:
                matches.append(year)
            if year == coming_year:
                break

        return tuple(matches)


# Singleton
_resolver: ModelYearResolver | None = None

def get_model_year_resolver() -> ModelYearResolver:
    global _resolver
    if _resolver is None:
        _resolver = ModelYearResolver()
    return _resolver
