import math
import re
from numbers import Real
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

# Ordine fisso delle dimensioni: determina l'ordine di confronto
PERSONALITY_DIMENSIONS: Tuple[str, ...] = (
    "emotional",
    "extrovert",
    "structure",
    "challenge",
    "stimulation",
    "help",
)

# Slider testuali: solo notazione decimale (niente esponenti o esadecimali)
_SLIDER_TEXT = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


def _finite_number(value: Any) -> Optional[float]:
    """Il valore come float finito, None se non numerico, non finito o fuori scala."""
    if not isinstance(value, Real) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


class PersonalityVector(BaseModel):
    """Tratti di personalità del candidato (None = dato non ancora raccolto)."""
    model_config = ConfigDict(frozen=True)

    emotional: Optional[float] = None
    extrovert: Optional[float] = None
    structure: Optional[float] = None
    challenge: Optional[float] = None
    stimulation: Optional[float] = None
    help: Optional[float] = None

    @field_validator(*PERSONALITY_DIMENSIONS, mode="before")
    @classmethod
    def _check_score(cls, value: Any) -> Optional[float]:
        if value is None:
            return None
        number = _finite_number(value)
        if number is None:
            raise ValueError(f"Personality score must be a finite number, got {value!r}")
        return number

    def as_tuple(self) -> Tuple[Optional[float], ...]:
        return tuple(getattr(self, name) for name in PERSONALITY_DIMENSIONS)


class TargetVector(BaseModel):
    """
    Profilo di personalità desiderato da un'offerta (valori slider).

    Gli slider arrivano come stringhe o numeri; vuoto/None = non impostato.
    Un valore impostato viene troncato a intero, come nel parsing originale degli slider.
    """
    model_config = ConfigDict(frozen=True)

    emotional: Optional[int] = None
    extrovert: Optional[int] = None
    structure: Optional[int] = None
    challenge: Optional[int] = None
    stimulation: Optional[int] = None
    help: Optional[int] = None

    @field_validator(*PERSONALITY_DIMENSIONS, mode="before")
    @classmethod
    def _parse_slider(cls, value: Any) -> Optional[int]:
        if value is None:
            return None
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return None
            if not _SLIDER_TEXT.fullmatch(text):
                raise ValueError(f"Slider value is not numeric: {value!r}")
            value = float(text)
        number = _finite_number(value)
        if number is None:
            raise ValueError(f"Slider value must be a finite number, got {value!r}")
        return math.trunc(number)

    def as_tuple(self) -> Tuple[Optional[int], ...]:
        return tuple(getattr(self, name) for name in PERSONALITY_DIMENSIONS)
