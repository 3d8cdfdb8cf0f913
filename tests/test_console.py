"""Tests for the plain-text renderers."""

import io

from candidate_portal.rendering.console import ConsoleRenderer, render_detail, render_table
from candidate_portal.storage.dataset import load


class TestRenderTable:
    def test_lists_records(self, raw_dataset):
        records = load(raw_dataset).records
        text = render_table(records, len(records))
        assert text.startswith("3 candidate(s) found")
        assert "Asha Rao" in text
        assert "Chen Li" in text

    def test_hidden_skill_count(self):
        records = load([{"id": 1, "skillsets": ["a", "b", "c", "d"]}]).records
        assert "a, b, c +1" in render_table(records, 1)

    def test_empty(self):
        assert render_table([], 0) == "0 candidate(s) found"

    def test_renderer_is_idempotent(self, raw_dataset):
        records = load(raw_dataset).records
        stream = io.StringIO()
        renderer = ConsoleRenderer(stream)
        renderer(records, 3)
        first = stream.getvalue()
        renderer(records, 3)
        assert stream.getvalue() == first * 2


class TestRenderDetail:
    def test_full_profile(self, raw_dataset):
        record = load(raw_dataset).get(3)
        text = render_detail(record)
        assert "Chen Li (#3)" in text
        assert "Doctorate:     Ph.D. Machine Learning" in text
        assert "Postgraduate:  M.S. Computer Science (-)" in text
        assert "  - ML Engineer" in text

    def test_missing_sections_are_skipped(self):
        record = load([{"id": 1, "name": "Solo"}]).get(1)
        text = render_detail(record)
        assert "Awards" not in text
        assert "Experience" not in text
        assert "Postgraduate:  - (-)" in text
