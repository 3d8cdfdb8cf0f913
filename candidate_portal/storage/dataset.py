"""In-memory dataset store and the one-shot JSON loader."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from candidate_portal.records.models import Record, RecordFormatError
from candidate_portal.utils.http_client import safe_get

logger = logging.getLogger("candidate_portal.storage")


class DatasetLoadError(Exception):
    """The dataset could not be read, parsed, or turned into records."""


@dataclass(frozen=True)
class DatasetStore:
    """Immutable record collection plus values derived from it at load time."""

    records: tuple[Record, ...] = ()
    all_skills: tuple[str, ...] = ()
    ug_degrees: tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> "DatasetStore":
        return cls()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records

    def get(self, record_id: int) -> Optional[Record]:
        """Look up a record by id; None on a miss."""
        for record in self.records:
            if record.id == record_id:
                return record
        return None

    def get_stats(self) -> dict:
        return {
            "total_records": len(self.records),
            "distinct_skills": len(self.all_skills),
            "with_postgraduate": sum(1 for r in self.records if r.education.has_postgraduate),
            "with_doctorate": sum(1 for r in self.records if r.education.doctorate),
            "by_ug_degree": {
                degree: sum(1 for r in self.records if r.education.undergraduate.degree == degree)
                for degree in self.ug_degrees
            },
        }


def load(raw_records: Any) -> DatasetStore:
    """Build a store from parsed JSON in one pass over the records.

    Skills and undergraduate degrees keep first-occurrence order (dicts
    preserve insertion order, so they double as ordered sets).
    """
    if not isinstance(raw_records, list):
        raise DatasetLoadError(
            f"dataset must be a JSON array of records, got {type(raw_records).__name__}"
        )

    records = []
    seen_ids = set()
    skills: dict[str, None] = {}
    degrees: dict[str, None] = {}

    for index, raw in enumerate(raw_records):
        try:
            record = Record.from_dict(raw)
        except RecordFormatError as e:
            raise DatasetLoadError(f"record #{index}: {e}") from e

        if record.id in seen_ids:
            raise DatasetLoadError(f"record #{index}: duplicate id {record.id}")
        seen_ids.add(record.id)

        records.append(record)
        for skill in record.skills:
            skills.setdefault(skill, None)
        if record.education.undergraduate.degree:
            degrees.setdefault(record.education.undergraduate.degree, None)

    return DatasetStore(
        records=tuple(records),
        all_skills=tuple(skills),
        ug_degrees=tuple(degrees),
    )


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_source(source: str, timeout: int = 30) -> str:
    """Fetch the raw JSON text from a URL or a local file."""
    if is_url(source):
        response = safe_get(source, timeout=timeout)
        if response is None:
            raise DatasetLoadError(f"could not fetch dataset from {source}")
        return response.text

    path = Path(source)
    if not path.exists():
        raise DatasetLoadError(f"dataset file not found: {source}")
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise DatasetLoadError(f"could not read dataset file {source}: {e}") from e


def load_dataset(source: str, timeout: int = 30) -> DatasetStore:
    """Read, parse and load the dataset from ``source`` (path or URL)."""
    text = read_source(source, timeout=timeout)
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise DatasetLoadError(f"dataset at {source} is not valid JSON: {e}") from e

    store = load(raw)
    logger.info(
        "Loaded %d records (%d distinct skills) from %s",
        len(store), len(store.all_skills), source,
    )
    return store
