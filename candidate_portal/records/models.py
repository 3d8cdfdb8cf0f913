"""Candidate record data model."""

from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import quote

from candidate_portal.utils.text_processing import parse_float

AVATAR_PLACEHOLDER = "image_link"
AVATAR_SERVICE = "https://ui-avatars.com/api/?name={name}&background=random&color=fff"


class RecordFormatError(ValueError):
    """Raised when a raw entry cannot be turned into a Record at all."""


def _str_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _cgpa(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return parse_float(value)


def _sequence(value: Any, name: str) -> list:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise RecordFormatError(f"{name} must be a list, got {type(value).__name__}")
    return list(value)


def _str_tuple(value: Any, name: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,) if value else ()
    return tuple(str(item) for item in _sequence(value, name))


def _mapping(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


@dataclass(frozen=True)
class Degree:
    """One education level: degree title and its CGPA, both optional."""

    degree: Optional[str] = None
    cgpa: Optional[float] = None

    @property
    def cgpa_or_zero(self) -> float:
        return self.cgpa if self.cgpa is not None else 0.0

    @classmethod
    def from_dict(cls, raw: Any) -> "Degree":
        raw = _mapping(raw)
        return cls(degree=_str_or_none(raw.get("bsc_degree")), cgpa=_cgpa(raw.get("cgpa")))

    def to_dict(self) -> dict:
        return {"bsc_degree": self.degree, "cgpa": self.cgpa}


@dataclass(frozen=True)
class Education:
    undergraduate: Degree = field(default_factory=Degree)
    postgraduate: Optional[Degree] = None
    doctorate: Optional[str] = None

    @property
    def has_postgraduate(self) -> bool:
        """True only when a postgraduate degree title is present and non-empty."""
        return bool(self.postgraduate and self.postgraduate.degree)

    @classmethod
    def from_dict(cls, raw: Any) -> "Education":
        raw = _mapping(raw)
        pg_raw = raw.get("postgraduate")
        return cls(
            undergraduate=Degree.from_dict(raw.get("undergraduate")),
            postgraduate=Degree.from_dict(pg_raw) if isinstance(pg_raw, dict) else None,
            doctorate=_str_or_none(raw.get("doctorate")) or None,
        )

    def to_dict(self) -> dict:
        return {
            "undergraduate": self.undergraduate.to_dict(),
            "postgraduate": self.postgraduate.to_dict() if self.postgraduate else None,
            "doctorate": self.doctorate,
        }


@dataclass(frozen=True)
class Contact:
    email: str = ""
    mobile_no: str = ""


@dataclass(frozen=True)
class Links:
    image_url: str = ""
    linkedin: str = ""
    github: str = ""
    resume_link: str = ""


@dataclass(frozen=True)
class Publication:
    title: str = ""
    url: str = ""


@dataclass(frozen=True)
class Record:
    """One candidate profile. Immutable once loaded."""

    id: int
    name: str = ""
    bio: str = ""
    skills: tuple[str, ...] = ()
    education: Education = field(default_factory=Education)
    experience: tuple[str, ...] = ()
    contact: Contact = field(default_factory=Contact)
    links: Links = field(default_factory=Links)
    awards: tuple[str, ...] = ()
    certifications: tuple[str, ...] = ()
    publications: tuple[Publication, ...] = ()

    @property
    def skill_set(self) -> frozenset[str]:
        return frozenset(self.skills)

    @property
    def experience_count(self) -> int:
        return len(self.experience)

    @property
    def domain_label(self) -> str:
        return self.education.undergraduate.degree or "General"

    @property
    def avatar_url(self) -> str:
        """Profile image, or a generated initials avatar when none is set."""
        image = self.links.image_url
        if image and image != AVATAR_PLACEHOLDER:
            return image
        return AVATAR_SERVICE.format(name=quote(self.name, safe=""))

    def preview_skills(self, limit: int = 3) -> tuple[tuple[str, ...], int]:
        """Return (first ``limit`` skills, number of hidden skills) for cards."""
        shown = self.skills[:limit]
        return shown, max(len(self.skills) - limit, 0)

    @classmethod
    def from_dict(cls, raw: Any) -> "Record":
        """Build a Record from one JSON object, defaulting optional fields.

        Raises RecordFormatError if the entry is not an object, lacks an
        integer ``id``, or holds a non-list where a list field is expected.
        """
        if not isinstance(raw, dict):
            raise RecordFormatError(f"record must be an object, got {type(raw).__name__}")

        record_id = raw.get("id")
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            raise RecordFormatError(f"record id must be an integer, got {record_id!r}")

        contact = _mapping(raw.get("contact"))
        links = _mapping(raw.get("links"))
        publications = tuple(
            Publication(title=str(p.get("title", "")), url=str(p.get("url", "")))
            for p in _sequence(raw.get("publications"), "publications")
            if isinstance(p, dict)
        )

        return cls(
            id=record_id,
            name=str(raw.get("name") or ""),
            bio=str(raw.get("bio") or ""),
            skills=_str_tuple(raw.get("skillsets"), "skillsets"),
            education=Education.from_dict(raw.get("education")),
            experience=_str_tuple(raw.get("experience"), "experience"),
            contact=Contact(
                email=str(contact.get("email") or ""),
                mobile_no=str(contact.get("mobile_no") or ""),
            ),
            links=Links(
                image_url=str(links.get("image_url") or ""),
                linkedin=str(links.get("linkedin") or ""),
                github=str(links.get("github") or ""),
                resume_link=str(links.get("resume_link") or ""),
            ),
            awards=_str_tuple(raw.get("awards"), "awards"),
            certifications=_str_tuple(raw.get("licenses_and_certifications"), "licenses_and_certifications"),
            publications=publications,
        )

    def to_dict(self) -> dict:
        """Convert back to the source JSON shape for API responses."""
        return {
            "id": self.id,
            "name": self.name,
            "bio": self.bio,
            "skillsets": list(self.skills),
            "education": self.education.to_dict(),
            "experience": list(self.experience),
            "contact": {"email": self.contact.email, "mobile_no": self.contact.mobile_no},
            "links": {
                "image_url": self.links.image_url,
                "linkedin": self.links.linkedin,
                "github": self.links.github,
                "resume_link": self.links.resume_link,
            },
            "awards": list(self.awards),
            "licenses_and_certifications": list(self.certifications),
            "publications": [{"title": p.title, "url": p.url} for p in self.publications],
        }
