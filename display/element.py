"""Display rows shown on the signing confirmation screen."""
from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Iterable, List


class Sensitivity(enum.Enum):
    REGULAR = "regular"
    EXPERT = "expert"


@dataclass(frozen=True)
class Element:
    label: str
    value: str
    sensitivity: Sensitivity = Sensitivity.REGULAR

    @classmethod
    def regular(cls, label: str, value: str) -> "Element":
        return cls(label, value, Sensitivity.REGULAR)

    @classmethod
    def expert(cls, label: str, value: str) -> "Element":
        return cls(label, value, Sensitivity.EXPERT)

    @property
    def is_expert(self) -> bool:
        return self.sensitivity is Sensitivity.EXPERT

    def as_expert(self) -> "Element":
        """Return a copy of this row demoted to the expert review."""
        return replace(self, sensitivity=Sensitivity.EXPERT)


def as_expert(elements: Iterable[Element]) -> List[Element]:
    return [element.as_expert() for element in elements]
