from collections import UserList
from dataclasses import dataclass
from enum import Enum


class COMPARATOR(str, Enum):
    EQ = "="
    NEQ = "!="
    LT = "<"
    GT = ">"
    LEQ = "<="
    GEQ = ">="

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Predicate:
    left: str
    right: str = None
    comp: COMPARATOR = None

    def __post_init__(self):
        if self.right is not None:
            object.__setattr__(self, "comp", self.comp or COMPARATOR.EQ)
        assert not ((self.comp is None) ^ (self.right is None))

    def xpath(self) -> str:
        if self.left == "position()" and self.comp == COMPARATOR.EQ:
            return f"{self.right}"
        if self.comp is None:
            return f"{self.left}"
        return f"{self.left} {self.comp} {self.right}"


class ContainsPredicate(Predicate):
    """Checks whether the string value of the context node contains 'text'.
    'text' is inserted verbatim between 'quote' characters, it is not escaped:
    text -> contains(., 'text')
    """

    def __init__(self, text, quote="'") -> None:
        super().__init__(f"contains(., {quote}{text}{quote})")


class Conjunction(UserList):
    operator = " and "

    def xpath(self) -> str:
        return self.operator.join(p.xpath() for p in self)


class Disjunction(Conjunction):
    operator = " or "


@dataclass(frozen=True)
class Negation:
    operand: Conjunction

    def xpath(self) -> str:
        return f"not({self.operand.xpath()})"
