from pydantic import BaseModel
from typing import Any, FrozenSet, Mapping, Optional

# Insieme di identificativi skill (match esatto, case-sensitive)
SkillSet = FrozenSet[str]


class Skill(BaseModel):
    """Skill come salvata nei record (es. {"value": "python", "label": "Python"})."""
    value: str
    label: Optional[str] = None


def skill_values(items: Any) -> SkillSet:
    """
    Estrae gli identificativi da una lista di skill.

    Accetta stringhe, oggetti Skill o dict con chiave "value".
    I duplicati collassano. Solleva ValueError se la struttura non è valida.
    """
    if items is None or isinstance(items, (str, bytes, Mapping)):
        raise ValueError(f"Skill list must be a sequence of identifiers, got {type(items).__name__}")
    try:
        iterator = iter(items)
    except TypeError:
        raise ValueError(f"Skill list must be iterable, got {type(items).__name__}") from None

    values = set()
    for item in iterator:
        if isinstance(item, Skill):
            value = item.value
        elif isinstance(item, Mapping):
            value = item.get("value")
        else:
            value = item
        if not isinstance(value, str):
            raise ValueError(f"Invalid skill identifier: {item!r}")
        values.add(value)
    return frozenset(values)
