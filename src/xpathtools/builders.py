import logging
from typing import Iterable, List, Union

import regex
from xpathtools.objects.xpath.node import AXISNAMES, XPathNode
from xpathtools.objects.xpath.path import XPath, count, union
from xpathtools.objects.xpath.predicate import (Conjunction,
                                                ContainsPredicate,
                                                Disjunction, Negation,
                                                Predicate)

ELEMENT_NAME = regex.compile(r"^[A-Za-z0-9]+")


def _as_list(values: Union[str, Iterable[str]]) -> List[str]:
    # A single string is one value, not a sequence of characters.
    if isinstance(values, str):
        return [values]
    return list(values)


def xpath_intersect_nodesets(start: str, end: str = None) -> str:
    """Finds the nodes between two node-sets of the same kind using the
    Kayessian method for node-set intersection:

        $ns1[count(.|$ns2) = count($ns2)]

    $ns1 holds all nodes following 'start', $ns2 all nodes preceding 'end'.
    If 'end' is None, the next sibling of 'start' with the element name found
    at the very beginning of 'start' is used. Locators are inserted as they
    are, so 'start' = "//table/tr" results in "////table/tr/...".

    Args:
        start (str): XPath element used as starting point.
        end (str, optional): XPath element used as end point. Defaults to None.

    Returns:
        str: The resulting XPath expression.

    Example:
        >>> xpath_intersect_nodesets("h2", "h3")
        '//h2/following-sibling::node()[count(.|//h3/preceding-sibling::node()) = count(//h3/preceding-sibling::node())]'
    """
    if end is None:
        match = ELEMENT_NAME.search(start)
        element = match.group() if match else ""
        end = XPath(
            [start, XPathNode.nth_node(AXISNAMES.FSIB, element, 1)]
        ).xpath()

    ns1 = XPath.descendant(start, XPathNode(axisname=AXISNAMES.FSIB))
    ns2 = XPath.descendant(end, XPathNode(axisname=AXISNAMES.PSIB)).xpath()

    intersection = Predicate(count(union(".", ns2)), right=count(ns2))
    ns1[-1].predicates.append([intersection])

    xpath = ns1.xpath()
    logging.debug(f"Node-set intersection: {xpath}")
    return xpath


def xpath_exclude_attrs(attrs: Union[str, Iterable[str]]) -> str:
    """Filters out nodes containing all of 'attrs'.

    >>> xpath_exclude_attrs(["class", "id"])
    "not(contains(., 'class') and contains(., 'id'))"
    """
    return _filter_attrs(attrs, negate=True)


def xpath_include_attrs(attrs: Union[str, Iterable[str]]) -> str:
    """Keeps nodes containing all of 'attrs'.

    >>> xpath_include_attrs(["class", "id"])
    "contains(., 'class') and contains(., 'id')"
    """
    return _filter_attrs(attrs, negate=False)


def _filter_attrs(attrs: Union[str, Iterable[str]], negate: bool) -> str:
    """Creates a predicate filtering nodes by the presence or absence of 'attrs'.

    Args:
        attrs (Union[str, Iterable[str]]): Attributes, inserted unescaped and in order.
        negate (bool): If True, nodes with the specified attributes are excluded.
        Otherwise only nodes with the specified attributes are kept.

    Returns:
        str: The resulting XPath expression, "" for no 'attrs'.
    """
    predicate = Conjunction(ContainsPredicate(attr) for attr in _as_list(attrs))
    if negate:
        predicate = Negation(predicate)

    xpath = predicate.xpath()
    logging.debug(f"Attribute filter (negate={negate}): {xpath}")
    return xpath


def xpath_get_index(root: str, nodeset: str) -> str:
    """Creates an XPath expression returning the index of a node within a node-set.
    The count of preceding siblings is 0-based; add 1 for a position() predicate.

    Args:
        root (str): Full XPath that serves as the root for 'nodeset'.
        nodeset (str): XPath of the node-set, relative to 'root'.

    Returns:
        str: The XPath expression for the index.
    """
    path = XPath([root, nodeset, XPathNode(axisname=AXISNAMES.PSIB, nodetest="*")])
    xpath = count(path.xpath())
    logging.debug(f"Index: {xpath}")
    return xpath


def xpath_contains(tags: Union[str, Iterable[str]]) -> str:
    """Checks if a node contains any of 'tags'.

    >>> xpath_contains(["class", "id"])
    'contains(., "class") or contains(., "id")'
    """
    xpath = Disjunction(
        ContainsPredicate(tag, quote='"') for tag in _as_list(tags)
    ).xpath()
    logging.debug(f"Tag containment: {xpath}")
    return xpath
