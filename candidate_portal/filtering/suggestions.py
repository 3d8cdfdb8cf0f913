"""Autocomplete suggestions for the skill search box."""

from typing import Container, Iterable, Optional

from candidate_portal.utils.text_processing import contains_ci


def suggest(
    query: str,
    selection: Container[str],
    all_skills: Iterable[str],
    limit: Optional[int] = None,
) -> list[str]:
    """Return unselected skills containing ``query``, case-insensitively.

    An empty query yields no suggestions; the box only opens once the user
    has typed something. Order follows ``all_skills``.
    """
    if not query:
        return []

    matches = []
    for skill in all_skills:
        if contains_ci(skill, query) and skill not in selection:
            matches.append(skill)
            if limit is not None and len(matches) >= limit:
                break
    return matches
