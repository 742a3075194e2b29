"""Rules deciding when an open element is ended by the start of another.

HTML lets authors leave out many end tags: a paragraph ends when a block
starts, a list item ends when the next one starts, and so on. Each rule here
is a ClosingPolicy attached to the name of the element that may be left
open. When a new start tag arrives the converter asks the policy of every
open element, innermost first, whether that element has to be closed before
the new one is written.

A policy is one of two kinds:

* PARAGRAPH closes the element for any child that is not inline.
* NESTED uses three sets of names. "closers" are the children that can end
  the element at all. "parents" are containers that, when open inside the
  element, shield it (a nested <ul> keeps an outer <li> open). "peers" are
  the siblings of the element; a peer ends the evaluation because only the
  immediate sibling relationship matters.
"""

from collections import namedtuple

from .constants import isInlineElement
from ._utils import Dispatcher

# Evaluation results
CONTINUE = 0
CLOSE = 1
CLOSE_AND_STOP = 2

PARAGRAPH = "paragraph"
NESTED = "nested"

ClosingPolicy = namedtuple("ClosingPolicy", ["kind", "peers", "parents", "closers"])


def nestedPolicy(peers, parents, closers=None):
    peers = frozenset(peers)
    if closers is None:
        closers = peers
    return ClosingPolicy(NESTED, peers, frozenset(parents), frozenset(closers))


paragraphPolicy = ClosingPolicy(PARAGRAPH, frozenset(), frozenset(), frozenset())

tableSections = ("thead", "tbody", "tfoot", "caption")

policies = Dispatcher([
    ("p", paragraphPolicy),
    ("li", nestedPolicy(("li",), ("ol", "ul"))),
    (("dt", "dd"), nestedPolicy(("dt", "dd"), ("dl",))),
    (("td", "th"), nestedPolicy(("td", "th"), ("table",),
                                ("td", "th", "tr") + tableSections)),
    ("tr", nestedPolicy(("tr",), ("table",), ("tr",) + tableSections)),
    (tableSections, nestedPolicy(tableSections, ("table",))),
    (("head", "body"), nestedPolicy(("head", "body"), ("html",))),
    ("option", nestedPolicy(("option",), ("select", "datalist"),
                            ("option", "optgroup"))),
    ("optgroup", nestedPolicy(("optgroup",), ("select",))),
    (("rt", "rp"), nestedPolicy(("rt", "rp"), ("ruby",))),
])


def getPolicy(name):
    """Return the ClosingPolicy for an element name, or None."""
    return policies[name]


def evaluate(policy, openElements, index, childName):
    """Decide what the start of childName means for openElements[index].

    Returns CONTINUE, CLOSE or CLOSE_AND_STOP.
    """
    if policy.kind == PARAGRAPH:
        if isInlineElement(childName):
            return CONTINUE
        return CLOSE

    if childName not in policy.closers:
        return CONTINUE

    for name in openElements[index + 1:]:
        if name in policy.parents:
            return CONTINUE

    if childName in policy.peers:
        return CLOSE_AND_STOP
    return CLOSE
