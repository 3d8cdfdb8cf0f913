"""Full-dataset CSV export.

Always receives the whole dataset; the current filter state never
narrows an export.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Iterable, Sequence

from candidate_portal.records.models import Record

logger = logging.getLogger("candidate_portal.export")

HEADERS = [
    "ID", "Name", "Bio", "Email", "Mobile",
    "UG Degree", "UG CGPA", "PG Degree", "PG CGPA", "Doctorate",
    "Skills", "Experience", "Certifications", "LinkedIn", "GitHub",
]


def _number(value: float) -> str:
    # 8.0 -> "8", 7.25 -> "7.25"
    return f"{value:g}"


def record_to_row(record: Record) -> list:
    ug = record.education.undergraduate
    pg = record.education.postgraduate
    pg_cgpa = pg.cgpa if pg else None

    return [
        record.id,
        record.name,
        record.bio,
        record.contact.email,
        record.contact.mobile_no,
        ug.degree or "",
        _number(ug.cgpa_or_zero),
        (pg.degree if pg else None) or "",
        _number(pg_cgpa) if pg_cgpa else "N/A",
        record.education.doctorate or "",
        ", ".join(record.skills),
        "; ".join(record.experience),
        ", ".join(record.certifications),
        record.links.linkedin,
        record.links.github,
    ]


def render_csv(records: Iterable[Record]) -> str:
    """Serialize records to CSV text with a fixed header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(HEADERS)
    for record in records:
        writer.writerow(record_to_row(record))
    return buffer.getvalue()


def write_csv(records: Sequence[Record], path: str) -> int:
    """Write the export to ``path``. Returns the number of rows written.

    An empty dataset writes nothing.
    """
    if not records:
        logger.warning("Export skipped: dataset is empty")
        return 0

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_csv(records), encoding="utf-8")
    logger.info("Exported %d records to %s", len(records), out)
    return len(records)
