"""
Test Personality Insights
"""

import pytest

from jobmatch.services.matcher import InvalidInputError
from jobmatch.services.personality_insights import personality_from_insights


INSIGHTS_PAYLOAD = {
    "personality": [
        {"trait_id": "big5_openness", "percentile": 0.5},
        {"trait_id": "big5_extraversion", "percentile": 0.25},
        {"trait_id": "big5_neuroticism", "percentile": 0.9},
    ],
    "needs": [
        {"trait_id": "need_structure", "percentile": 0.4},
        {"trait_id": "need_challenge", "percentile": 0.75},
        {"trait_id": "need_curiosity", "percentile": 0.1},
    ],
    "values": [
        {"trait_id": "value_openness_to_change", "percentile": 0.6},
        {"trait_id": "value_self_transcendence", "percentile": 1.0},
    ],
}


def test_full_payload():
    vector = personality_from_insights(INSIGHTS_PAYLOAD)

    assert vector.emotional == pytest.approx(50.0)
    assert vector.extrovert == pytest.approx(25.0)
    # needs e values sono su scala 0-10
    assert vector.structure == pytest.approx(4.0)
    assert vector.challenge == pytest.approx(7.5)
    assert vector.stimulation == pytest.approx(6.0)
    assert vector.help == pytest.approx(10.0)


def test_missing_sections_leave_dimensions_unset():
    vector = personality_from_insights({"personality": INSIGHTS_PAYLOAD["personality"]})

    assert vector.emotional == pytest.approx(50.0)
    assert vector.structure is None
    assert vector.help is None


def test_trait_in_wrong_section_is_ignored():
    vector = personality_from_insights({"values": [{"trait_id": "big5_openness", "percentile": 0.5}]})
    assert vector.emotional is None


@pytest.mark.parametrize("payload", [
    None,
    {"personality": {"trait_id": "big5_openness"}},
    {"personality": ["big5_openness"]},
    {"needs": [{"trait_id": "need_structure", "percentile": "high"}]},
])
def test_malformed_payload(payload):
    with pytest.raises(InvalidInputError):
        personality_from_insights(payload)
