from dataclasses import dataclass
from enum import Enum
from typing import List

from xpathtools.objects.xpath.predicate import Predicate


class AXISNAMES(str, Enum):
    ANC = "ancestor"
    ANOS = "ancestor-or-self"
    ATTR = "attribute"
    CHLD = "child"
    DESC = "descendant"
    DEOS = "descendant-or-self"
    FOLW = "following"
    FSIB = "following-sibling"
    NS = "namespace"
    PAR = "parent"
    PREC = "preceding"
    PSIB = "preceding-sibling"
    SELF = "self"

    def __str__(self) -> str:
        return self.value


@dataclass
class XPathNode:
    """A single step of an XPath, adapted from the W3C representation.
    step := axisname::nodetest[predicates]
    See: https://www.w3.org/TR/1999/REC-xpath-19991116/#section-Location-Steps

    Predicates are kept in conjunctive normal form: each inner list is rendered
    as one bracketed disjunction.
    The nodetest is rendered verbatim, even when it is empty.
    """

    axisname: AXISNAMES = None
    nodetest: str = None
    predicates: List[List[Predicate]] = None

    def __post_init__(self):
        self.axisname = self.axisname or AXISNAMES.CHLD
        if self.nodetest is None:
            self.nodetest = "node()"
        self.predicates = self.predicates or []

    def xpath(self) -> str:
        predicate_str = "".join(
            "[" + " or ".join(p.xpath() for p in _list) + "]"
            for _list in self.predicates
        )
        if not predicate_str:
            if self.axisname is AXISNAMES.DEOS:
                return ""
            if self.axisname is AXISNAMES.SELF:
                return "."
            if self.axisname is AXISNAMES.PAR:
                return ".."

        if self.axisname is AXISNAMES.CHLD:
            return self.nodetest + predicate_str
        return f"{self.axisname}::{self.nodetest}" + predicate_str

    def add_predicate(self, left, right=None, comp=None):
        p = Predicate(left, right=right, comp=comp)
        self.predicates.append([p])
        return p

    @staticmethod
    def nth_node(axisname: AXISNAMES, nodetest: str, position: int):
        # Shortcut for axisname::nodetest[position]
        node = XPathNode(axisname=axisname, nodetest=nodetest)
        node.add_predicate("position()", right=position)
        return node

    @staticmethod
    def descendant_node():
        # Renders as an empty step, which yields '//' once joined into an XPath.
        return XPathNode(axisname=AXISNAMES.DEOS)
