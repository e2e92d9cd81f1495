"""Shared fixtures: a small resume variant, its ideal profile and a master profile."""

import copy

import pytest

from tailor.loader import resume_from_dict, candidate_from_dict, ideal_profile_from_dict


RESUME_DATA = {
    "personal_info": {
        "fullName": "Jane Smith",
        "email": "jane@example.com",
        "summary": "Backend engineer building reliable data pipelines in Python for fintech teams.",
    },
    "experience": [
        {
            "company": "Acme",
            "title": "Senior Engineer",
            "startDate": "2019-01",
            "endDate": "",
            "current": True,
            "bullets": [
                "Grew revenue by 35% through pricing experiments",
                "Managed a team of 12 engineers",
                "Wrote documentation for internal tools",
                "Worked at the company since 2019",
            ],
        }
    ],
    "education": [{"institution": "State University", "degree": "BSc", "field": "Computer Science"}],
    "skills": [{"name": "Python"}, {"name": "Docker"}],
    "included_sections": ["personal_info", "experience", "skills", "education"],
    "section_order": ["personal_info", "experience", "skills", "education"],
}

IDEAL_DATA = {
    "summary": "Engineer with deep Python and Kubernetes experience.",
    "keyword_map": {
        "hard_skills": [
            {"keyword": "python", "importance": "critical", "frequency": 4},
            {"keyword": "kubernetes", "importance": "important", "frequency": 2},
        ],
        "soft_skills": [{"keyword": "leadership", "importance": "nice_to_have", "frequency": 1}],
        "industry_terms": [{"keyword": "data pipelines", "importance": "important", "frequency": 2}],
        "qualifications": [],
        "action_verbs": [{"keyword": "manage", "importance": "critical", "frequency": 3}],
    },
    "ideal_measurable_results_count": 4,
    "ideal_structure": {
        "section_order": ["personal_info", "experience", "skills", "education"],
        "bullet_count_per_experience": 4,
        "has_summary": True,
        "summary_length_range": [10, 20],
        "total_page_count": 1,
    },
}


def _master_data():
    data = copy.deepcopy(RESUME_DATA)
    del data["included_sections"]
    del data["section_order"]
    data["skills"].append({"name": "Kubernetes"})
    data["experience"].append({
        "company": "Globex",
        "title": "Engineer",
        "bullets": [
            "Cut cloud costs by $1.2M annually",
            "Led leadership workshops",
        ],
    })
    return data


@pytest.fixture
def resume_data():
    return copy.deepcopy(RESUME_DATA)


@pytest.fixture
def ideal_data():
    return copy.deepcopy(IDEAL_DATA)


@pytest.fixture
def master_data():
    return _master_data()


@pytest.fixture
def resume(resume_data):
    return resume_from_dict(resume_data)


@pytest.fixture
def ideal(ideal_data):
    return ideal_profile_from_dict(ideal_data)


@pytest.fixture
def master(master_data):
    return candidate_from_dict(master_data)
