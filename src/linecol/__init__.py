from linecol.clusters import DEFAULT_CLUSTER_COUNTER
from linecol.clusters import ClusterCounter
from linecol.clusters import GraphemeClusterCounter
from linecol.diagnostics import Diagnostic
from linecol.diagnostics import Severity
from linecol.errors import ClusterCountingUnavailableError
from linecol.errors import InvalidConfigurationError
from linecol.errors import LineColError
from linecol.errors import OffsetNotOnCharBoundaryError
from linecol.errors import OffsetOutOfRangeError
from linecol.indexing_policy import IndexingPolicy
from linecol.line_index import LineIndex
from linecol.line_index import TextSlice
from linecol.position import Position
from linecol.position import Range
from linecol.position import SourceLocation

__all__ = [
    "DEFAULT_CLUSTER_COUNTER",
    "ClusterCounter",
    "ClusterCountingUnavailableError",
    "Diagnostic",
    "GraphemeClusterCounter",
    "IndexingPolicy",
    "InvalidConfigurationError",
    "LineColError",
    "LineIndex",
    "OffsetNotOnCharBoundaryError",
    "OffsetOutOfRangeError",
    "Position",
    "Range",
    "Severity",
    "SourceLocation",
    "TextSlice",
]
