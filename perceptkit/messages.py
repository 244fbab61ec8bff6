"""Message records exchanged by the dynamic parameter registry."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import List, Sequence


@dataclass
class IntParameter:
    name: str = ""
    value: int = 0


@dataclass
class DoubleParameter:
    name: str = ""
    value: float = 0.0


@dataclass
class BoolParameter:
    name: str = ""
    value: bool = False


@dataclass
class StrParameter:
    name: str = ""
    value: str = ""


@dataclass
class GroupState:
    name: str = ""
    state: bool = False
    id: int = 0
    parent: int = 0


@dataclass
class ParamDescription:
    name: str = ""
    type: str = ""
    level: int = 0
    description: str = ""
    edit_method: str = ""


@dataclass
class Group:
    name: str = ""
    type: str = ""
    parameters: List[ParamDescription] = field(default_factory=list)
    parent: int = 0
    id: int = 0


def _same(a: Sequence, b: Sequence, tolerant: bool = False) -> bool:
    if len(a) != len(b):
        return False
    for x, y in zip(a, b):
        if x.name != y.name:
            return False
        if tolerant:
            if not abs(x.value - y.value) < sys.float_info.epsilon:
                return False
        elif x.value != y.value:
            return False
    return True


@dataclass
class Config:
    bools: List[BoolParameter] = field(default_factory=list)
    ints: List[IntParameter] = field(default_factory=list)
    strs: List[StrParameter] = field(default_factory=list)
    doubles: List[DoubleParameter] = field(default_factory=list)
    groups: List[GroupState] = field(default_factory=list)

    def same_values(self, other: "Config") -> bool:
        """Whether the int, double and bool values match those of ``other``.

        Doubles are equal when they differ by less than machine epsilon;
        strings and groups are not compared.
        """
        return (
            _same(self.ints, other.ints)
            and _same(self.doubles, other.doubles, tolerant=True)
            and _same(self.bools, other.bools)
        )


@dataclass
class ConfigDescription:
    groups: List[Group] = field(default_factory=list)
    max: Config = field(default_factory=Config)
    min: Config = field(default_factory=Config)
    dflt: Config = field(default_factory=Config)