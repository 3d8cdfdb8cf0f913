"""
Pytest configuration and shared fixtures.
"""

import json

import pytest


def make_raw(record_id: int, **kwargs) -> dict:
    """Build one raw record in the dataset's JSON shape."""
    raw = {
        "id": record_id,
        "name": f"Candidate {record_id}",
        "bio": "Short bio.",
        "contact": {"email": f"c{record_id}@example.com", "mobile_no": "555-0100"},
        "links": {"image_url": "image_link", "linkedin": "", "github": "", "resume_link": ""},
        "education": {
            "undergraduate": {"bsc_degree": "B.Tech Computer Science", "cgpa": 7.5},
            "postgraduate": {"bsc_degree": "", "cgpa": None},
            "doctorate": "",
        },
        "skillsets": [],
        "experience": [],
    }
    raw.update(kwargs)
    return raw


@pytest.fixture
def raw_dataset() -> list[dict]:
    return [
        make_raw(
            1,
            name="Asha Rao",
            skillsets=["Go", "SQL", "Kubernetes"],
            education={
                "undergraduate": {"bsc_degree": "B.Tech Computer Science", "cgpa": 8.4},
                "postgraduate": {"bsc_degree": "M.Tech Data Science", "cgpa": 8.9},
                "doctorate": "",
            },
            experience=["Intern", "Backend Engineer"],
        ),
        make_raw(
            2,
            name="Ben Okafor",
            skillsets=["JavaScript", "React", "SQL"],
            education={"undergraduate": {"bsc_degree": "B.Sc Physics", "cgpa": 6.9}},
            experience=["Frontend Developer"],
        ),
        make_raw(
            3,
            name="Chen Li",
            skillsets=["Python", "Go"],
            education={
                "undergraduate": {"bsc_degree": "B.Tech Computer Science", "cgpa": 9.0},
                "postgraduate": {"bsc_degree": "M.S. Computer Science"},
                "doctorate": "Ph.D. Machine Learning",
            },
            experience=["RA", "ML Engineer", "Scientist"],
        ),
    ]


@pytest.fixture
def dataset_file(tmp_path, raw_dataset):
    """Write the raw dataset to a JSON file and return its path."""
    path = tmp_path / "students.json"
    path.write_text(json.dumps(raw_dataset), encoding="utf-8")
    return str(path)
