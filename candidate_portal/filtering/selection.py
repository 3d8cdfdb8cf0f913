"""Ordered, duplicate-free set of skills chosen as filter constraints."""

from typing import Iterable, Iterator


class SkillSelection:
    """Skills in the order the user picked them.

    Only add/remove/clear mutate it; the caller is responsible for
    recomputing the filtered view afterwards.
    """

    def __init__(self, skills: Iterable[str] = ()):
        self._skills: list[str] = []
        for skill in skills:
            self.add(skill)

    def add(self, skill: str) -> bool:
        """Append ``skill`` if not already selected. Returns True if it changed."""
        if skill in self._skills:
            return False
        self._skills.append(skill)
        return True

    def remove(self, skill: str) -> bool:
        """Drop ``skill`` if selected. Returns True if it changed."""
        if skill not in self._skills:
            return False
        self._skills.remove(skill)
        return True

    def clear(self):
        self._skills.clear()

    def to_display_list(self) -> list[str]:
        return list(self._skills)

    def __contains__(self, skill: object) -> bool:
        return skill in self._skills

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._skills))

    def __len__(self) -> int:
        return len(self._skills)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SkillSelection):
            return self._skills == other._skills
        return NotImplemented

    def __repr__(self) -> str:
        return f"SkillSelection({self._skills!r})"
