import logging
import re

from .tokens import PatternError

logger = logging.getLogger(__name__)


class OrderSettings:
    """Ordered list of attribute name patterns.

    Each pattern is a regular expression that has to match a whole attribute
    name (``"on.*"`` matches ``onclick`` but ``"on"`` does not). A pattern is
    compiled the first time it is tested against a name and cached, so an
    invalid pattern only fails once some attribute reaches it.
    """

    __slots__ = ("_compiled", "patterns")

    def __init__(self, patterns=()):
        self.patterns = tuple(patterns)
        self._compiled = [None] * len(self.patterns)
        logger.debug("attribute order: %r", self.patterns)

    def __repr__(self):
        return f"OrderSettings({list(self.patterns)!r})"

    def rank(self, name):
        """Index of the first pattern matching ``name``, or None."""
        for index in range(len(self.patterns)):
            if self._regex(index).fullmatch(name):
                return index
        return None

    def _regex(self, index):
        regex = self._compiled[index]
        if regex is None:
            pattern = self.patterns[index]
            try:
                regex = re.compile(f"(?:{pattern})")
            except re.error as exc:
                raise PatternError(pattern, str(exc)) from exc
            self._compiled[index] = regex
        return regex


def sort_attributes(attrs, settings):
    """Reorder ``attrs`` in place.

    Each name is claimed by the first pattern that matches it. Claimed names
    come first, grouped by pattern in pattern order; names claimed by the
    same pattern keep their order from the tag. Unclaimed names follow,
    sorted by name. When a name occurs more than once, every slot with that
    name ends up holding the last attribute of that name.
    """
    by_name = {}
    names = []
    for attr in attrs:
        by_name[attr.name] = attr
        names.append(attr.name)

    claimed = []
    unmatched = []
    for name in names:
        rank = settings.rank(name)
        if rank is None:
            unmatched.append(name)
        else:
            claimed.append((rank, name))
    # sort() is stable, so equal ranks keep tag order
    claimed.sort(key=lambda item: item[0])
    unmatched.sort()
    ordered = [name for _, name in claimed]
    ordered.extend(unmatched)

    attrs[:] = [by_name[name] for name in ordered]
    return attrs
