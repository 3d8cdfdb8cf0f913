"""Filter engine: six independent predicates combined by conjunction."""

from dataclasses import dataclass, fields, replace
from typing import Iterable, Optional, Sequence

from candidate_portal.records.models import Record
from candidate_portal.utils.text_processing import parse_bool, parse_float, parse_int

ALL_DEGREES = "all"


@dataclass(frozen=True)
class FilterParams:
    """Scalar filter settings. Defaults match an unfiltered view."""

    ug_degree: str = ALL_DEGREES
    min_ug_cgpa: float = 0.0
    min_pg_cgpa: float = 0.0
    require_pg: bool = False
    min_exp: int = 0

    @classmethod
    def from_inputs(cls, base: Optional["FilterParams"] = None, **raw) -> "FilterParams":
        """Parse raw form/CLI values on top of ``base``.

        Unparseable numbers become 0 rather than failing. Unknown keys raise
        TypeError, same as the dataclass constructor would.
        """
        base = base or cls()
        known = {f.name for f in fields(cls)}
        unknown = set(raw) - known
        if unknown:
            raise TypeError(f"unknown filter parameter(s): {', '.join(sorted(unknown))}")

        changes = {}
        if "ug_degree" in raw:
            value = raw["ug_degree"]
            changes["ug_degree"] = ALL_DEGREES if value is None or value == "" else str(value)
        if "min_ug_cgpa" in raw:
            changes["min_ug_cgpa"] = parse_float(raw["min_ug_cgpa"])
        if "min_pg_cgpa" in raw:
            changes["min_pg_cgpa"] = parse_float(raw["min_pg_cgpa"])
        if "require_pg" in raw:
            changes["require_pg"] = parse_bool(raw["require_pg"])
        if "min_exp" in raw:
            changes["min_exp"] = parse_int(raw["min_exp"])
        return replace(base, **changes)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def match_skills(record: Record, selection: Sequence[str]) -> bool:
    if not selection:
        return True
    owned = record.skill_set
    return all(skill in owned for skill in selection)


def match_ug_degree(record: Record, ug_degree: str) -> bool:
    if ug_degree == ALL_DEGREES:
        return True
    return ug_degree in (record.education.undergraduate.degree or "")


def match_ug_cgpa(record: Record, min_ug_cgpa: float) -> bool:
    return record.education.undergraduate.cgpa_or_zero >= min_ug_cgpa


def match_pg_requirement(record: Record, require_pg: bool) -> bool:
    return not require_pg or record.education.has_postgraduate


def match_pg_cgpa(record: Record, min_pg_cgpa: float) -> bool:
    # No postgraduate education never disqualifies. A degree without a
    # CGPA compares as 0.
    if not record.education.has_postgraduate:
        return True
    return record.education.postgraduate.cgpa_or_zero >= min_pg_cgpa


def match_experience(record: Record, min_exp: int) -> bool:
    return record.experience_count >= min_exp


def matches(record: Record, selection: Sequence[str], params: FilterParams) -> bool:
    """True iff ``record`` passes every predicate. Cheap scalar checks run first."""
    return (
        match_pg_requirement(record, params.require_pg)
        and match_ug_cgpa(record, params.min_ug_cgpa)
        and match_pg_cgpa(record, params.min_pg_cgpa)
        and match_experience(record, params.min_exp)
        and match_ug_degree(record, params.ug_degree)
        and match_skills(record, selection)
    )


def apply(
    records: Iterable[Record],
    selection: Iterable[str],
    params: FilterParams,
) -> list[Record]:
    """Return the records passing all predicates, in dataset order.

    Pure: no inputs are modified.
    """
    selected = list(selection)
    return [record for record in records if matches(record, selected, params)]
