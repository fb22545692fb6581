"""
Personality Insights
Estrae il PersonalityVector da un profilo restituito dal servizio esterno
di inferenza della personalità (sezioni "personality", "needs", "values").

La chiamata HTTP al servizio resta fuori da questo package: qui si
trasforma soltanto il payload già ricevuto.
"""

from typing import Any, Dict, Mapping, Tuple

from pydantic import ValidationError

from jobmatch.models.personality import PersonalityVector
from jobmatch.services.matcher import InvalidInputError


# trait_id -> (sezione del payload, dimensione, divisore della percentuale x100)
TRAIT_MAPPING: Dict[str, Tuple[str, str, float]] = {
    "big5_openness": ("personality", "emotional", 1.0),
    "big5_extraversion": ("personality", "extrovert", 1.0),
    "need_structure": ("needs", "structure", 10.0),
    "need_challenge": ("needs", "challenge", 10.0),
    "value_openness_to_change": ("values", "stimulation", 10.0),
    "value_self_transcendence": ("values", "help", 10.0),
}


def personality_from_insights(payload: Mapping[str, Any]) -> PersonalityVector:
    """
    Converte il payload in PersonalityVector.

    Big Five: percentile * 100. Needs e values: percentile * 100 / 10.
    I tratti assenti restano non impostati.
    """
    if not isinstance(payload, Mapping):
        raise InvalidInputError(f"Insights payload must be a mapping, got {type(payload).__name__}")

    scores: Dict[str, float] = {}
    for section in ("personality", "needs", "values"):
        traits = payload.get(section) or []
        if not isinstance(traits, list):
            raise InvalidInputError(f"Section '{section}' must be a list of traits")
        for trait in traits:
            if not isinstance(trait, Mapping):
                raise InvalidInputError(f"Invalid trait in '{section}': {trait!r}")
            mapping = TRAIT_MAPPING.get(trait.get("trait_id"))
            if mapping is None or mapping[0] != section:
                continue
            _, dimension, divisor = mapping
            percentile = trait.get("percentile")
            if isinstance(percentile, bool) or not isinstance(percentile, (int, float)):
                raise InvalidInputError(
                    f"Trait '{trait.get('trait_id')}' has no numeric percentile: {percentile!r}"
                )
            scores[dimension] = (percentile * 100) / divisor

    try:
        return PersonalityVector(**scores)
    except ValidationError as e:
        raise InvalidInputError(f"Malformed insights payload: {e}") from e
