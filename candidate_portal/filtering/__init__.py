from .predicates import ALL_DEGREES, FilterParams, apply, matches
from .selection import SkillSelection
from .suggestions import suggest

__all__ = [
    "ALL_DEGREES",
    "FilterParams",
    "SkillSelection",
    "apply",
    "matches",
    "suggest",
]
