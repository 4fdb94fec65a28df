from collections import UserList
from typing import Union

from xpathtools.objects.xpath.node import XPathNode


def count(expr: str) -> str:
    return f"count({expr})"


def union(*exprs: str) -> str:
    return "|".join(exprs)


class XPath(UserList):
    """A XPath wrapper representing a list of steps as a location path.
    Steps are either XPathNode instances or raw locator strings; both are joined
    with '/' as they are. Redundant slashes in raw locators are kept.
    """

    def xpath(self) -> str:
        if not self:
            return "/"
        return "/".join(map(_step_xpath, self))

    def __str__(self) -> str:
        return self.xpath()

    @staticmethod
    def descendant(*steps: Union[XPathNode, str]):
        """Returns '//' followed by 'steps'."""
        return XPath(
            [XPathNode.descendant_node(), XPathNode.descendant_node(), *steps]
        )


def _step_xpath(step: Union[XPathNode, str]) -> str:
    if isinstance(step, XPathNode):
        return step.xpath()
    return step
