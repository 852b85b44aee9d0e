"""
hintpath/types.py - rodzaje naruszeń i struktury wyniku weryfikacji.

Reference     - odczytany z pliku projektu wpis <Reference>: id + HintPath.
ViolationKind - zamknięta lista czterech komunikatów reguł.
Violation     - pojedyncze naruszenie reguły dla jednej referencji.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ViolationKind(StrEnum):
    """Stałe komunikaty naruszeń (wartości są częścią kontraktu wyjścia)."""

    MISSING_HINT_PATH                       = "missing HintPath"
    HINT_PATH_WITH_WRONG_PREFIX             = "HintPath does not start with known prefix"
    HINT_PATH_DOES_NOT_CONTAIN_REFERENCE_ID = "HintPath does not contain reference id"
    HINT_PATH_DOES_NOT_EXIST_ON_FILE_SYSTEM = "the file referenced by the HintPath does not exist"


@dataclass(frozen=True, slots=True)
class Reference:
    """
    Wpis <Reference> z pliku projektu.

    - id:        wartość atrybutu Include, np. "Foo.Bar"
    - hint_path: tekst elementu <HintPath> (None gdy elementu brak)
    """

    id: str
    hint_path: str | None = None


@dataclass(frozen=True, slots=True)
class Violation:
    """
    Pojedyncze naruszenie reguły.

    - reference: id referencji, której dotyczy naruszenie
    - hint_path: HintPath, który nie przeszedł reguły (None dla MISSING_HINT_PATH)
    - message:   rodzaj naruszenia (ViolationKind)
    """

    reference: str
    hint_path: str | None
    message: ViolationKind
