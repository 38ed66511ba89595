"""Counting of user-perceived characters (extended grapheme clusters)."""

from abc import ABC
from abc import abstractmethod
from typing import Final
from typing import final
from typing import override

import regex

_GRAPHEME_CLUSTER: Final = regex.compile(r"\X")


class ClusterCounter(ABC):
    @abstractmethod
    def count_clusters(self, text: str) -> int: ...


@final
class GraphemeClusterCounter(ClusterCounter):
    """Counts extended grapheme clusters as defined by Unicode UAX #29.

    A text cut in the middle of a cluster yields a partial cluster at its end,
    which is counted as a whole one.
    """

    @override
    def count_clusters(self, text: str) -> int:
        return sum(1 for _ in _GRAPHEME_CLUSTER.finditer(text))


DEFAULT_CLUSTER_COUNTER: Final[ClusterCounter] = GraphemeClusterCounter()
