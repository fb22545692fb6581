"""
Fixture condivise per i test del matching.
"""

import pytest
from typing import Any, Dict


@pytest.fixture
def jobseeker_record() -> Dict[str, Any]:
    """Documento jobseeker come salvato (skills come lista di {value, label})."""
    return {
        "_id": "js1",
        "username": "marco",
        "persona": "intern",
        "industry": "tech",
        "skills": [
            {"value": "python", "label": "Python"},
            {"value": "sql", "label": "SQL"},
        ],
        "emotional": 50,
        "extrovert": 60,
        "structure": 5,
        "challenge": 7,
        "stimulation": 4,
        "help": 6,
    }


@pytest.fixture
def job_record() -> Dict[str, Any]:
    """Job post con slider identici ai tratti del jobseeker."""
    return {
        "_id": "job1",
        "title": "Backend Intern",
        "company": "Acme",
        "persona": "intern",
        "industry": "tech",
        "skills": [
            {"value": "python", "label": "Python"},
            {"value": "sql", "label": "SQL"},
            {"value": "aws", "label": "AWS"},
        ],
        "emotionalSlider": "50",
        "extrovertSlider": "60",
        "unplannedSlider": "5",
        "challengeSlider": "7",
        "noveltySlider": "4",
        "helpSlider": "6",
    }


@pytest.fixture
def job_pool(job_record) -> list:
    """Pool misto: una offerta valida, una malformata, una migliore, una di altra industry."""
    sliders = {k: v for k, v in job_record.items() if k.endswith("Slider")}
    return [
        job_record,
        {"_id": "bad", "skills": "python"},
        {
            "_id": "job2",
            "title": "Data Intern",
            "persona": "intern",
            "industry": "tech",
            "skills": [{"value": "python"}],
            **sliders,
        },
        {
            "_id": "job3",
            "title": "Analyst",
            "persona": "intern",
            "industry": "finance",
            "skills": [],
            **sliders,
        },
    ]
