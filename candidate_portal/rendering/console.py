"""Plain-text renderers for the CLI: result table and candidate detail."""

import sys
from typing import Optional, Sequence, TextIO

from candidate_portal.records.models import Record
from candidate_portal.utils.text_processing import truncate


def _format_cgpa(value) -> str:
    return f"{value:g}" if value is not None else "-"


def render_table(records: Sequence[Record], total: int) -> str:
    """Render matching candidates as a fixed-width table."""
    lines = [f"{total} candidate(s) found"]
    if not records:
        return "\n".join(lines)

    lines.append(f"{'ID':>5}  {'Name':<24}  {'Domain':<22}  {'CGPA':>5}  {'Exp':>3}  Skills")
    lines.append("-" * 90)
    for record in records:
        shown, hidden = record.preview_skills()
        skills = ", ".join(shown)
        if hidden:
            skills += f" +{hidden}"
        lines.append(
            f"{record.id:>5}  {truncate(record.name, 24):<24}  "
            f"{truncate(record.domain_label, 22):<22}  "
            f"{_format_cgpa(record.education.undergraduate.cgpa):>5}  "
            f"{record.experience_count:>3}  {skills}"
        )
    return "\n".join(lines)


def _section(title: str, items: Sequence[str]) -> list[str]:
    if not items:
        return []
    return ["", f"{title}:"] + [f"  - {item}" for item in items]


def render_detail(record: Record) -> str:
    """Render one candidate's full profile."""
    edu = record.education
    ug = edu.undergraduate
    pg = edu.postgraduate

    lines = [
        f"{record.name} (#{record.id})",
        f"Email: {record.contact.email or '-'}    Mobile: {record.contact.mobile_no or '-'}",
        "",
        f"Undergraduate: {ug.degree or '-'} ({_format_cgpa(ug.cgpa)})",
        f"Postgraduate:  {(pg.degree if pg else None) or '-'} ({_format_cgpa(pg.cgpa if pg else None)})",
        f"Doctorate:     {edu.doctorate or '-'}",
    ]
    if record.bio:
        lines += ["", f'"{record.bio}"']
    if record.skills:
        lines += ["", "Domains / Expertise: " + ", ".join(record.skills)]

    lines += _section("Awards", record.awards)
    lines += _section("Licenses & Certifications", record.certifications)
    lines += _section("Publications", [f"{p.title} <{p.url}>" for p in record.publications])
    lines += _section("Experience", record.experience)

    links = [
        (label, url)
        for label, url in (
            ("GitHub", record.links.github),
            ("LinkedIn", record.links.linkedin),
            ("Resume", record.links.resume_link),
        )
        if url
    ]
    if links:
        lines += [""] + [f"{label}: {url}" for label, url in links]

    return "\n".join(lines)


class ConsoleRenderer:
    """Renderer collaborator printing the table to a stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def __call__(self, records: Sequence[Record], total: int) -> None:
        print(render_table(records, total), file=self.stream)
