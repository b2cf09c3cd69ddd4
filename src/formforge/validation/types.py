"""Core types for FormForge validation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class RuleMode(Enum):
    """How a rule set combines its rules.

    ALL: The value must pass every rule
    ANY: The value must pass at least one rule
    """

    ALL = "all"
    ANY = "any"


@dataclass
class RuleSet:
    """A group of rule descriptors evaluated together.

    Attributes:
        mode: ALL or ANY
        rules: Descriptors; each is a rule name, a ``[name, *params]``
            sequence or a nested RuleSet
    """

    mode: RuleMode = RuleMode.ALL
    rules: list[Any] = field(default_factory=list)
