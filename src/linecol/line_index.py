"""Offset to line/column lookup over an immutable text.

A `LineIndex` records the offset of every line start once and answers
`(line, column)` queries with a binary search over those offsets. Offsets are
code points for `str` texts and bytes for `bytes` texts. The index keeps a
reference to the text rather than a copy.
"""

import logging
import threading
from bisect import bisect_right
from typing import Final
from typing import Optional
from typing import final

from linecol.clusters import DEFAULT_CLUSTER_COUNTER
from linecol.clusters import ClusterCounter
from linecol.config import get_config
from linecol.errors import ClusterCountingUnavailableError
from linecol.errors import OffsetNotOnCharBoundaryError
from linecol.errors import OffsetOutOfRangeError
from linecol.indexing_policy import IndexingPolicy
from linecol.position import Position
from linecol.position import Range

logger: Final = logging.getLogger(__name__)

type TextSlice = str | bytes


def _find_line_terminator(text: TextSlice, start: int) -> int:
    if isinstance(text, str):
        return text.find("\n", start)
    return text.find(b"\n", start)


def _collect_line_starts(text: TextSlice) -> tuple[int, ...]:
    line_starts: Final = [0]
    terminator_offset = _find_line_terminator(text, 0)
    while terminator_offset != -1:
        line_starts.append(terminator_offset + 1)
        terminator_offset = _find_line_terminator(text, terminator_offset + 1)
    return tuple(line_starts)


def _is_utf8_continuation_byte(byte: int) -> bool:
    return byte & 0b1100_0000 == 0b1000_0000


def _utf8_sequence_length(lead_byte: int) -> int:
    if lead_byte & 0b1110_0000 == 0b1100_0000:
        return 2
    if lead_byte & 0b1111_0000 == 0b1110_0000:
        return 3
    if lead_byte & 0b1111_1000 == 0b1111_0000:
        return 4
    return 1  # ASCII, or an invalid byte that is decoded on its own.


def _splits_utf8_sequence(text: bytes, offset: int) -> bool:
    if offset == 0 or offset >= len(text) or not _is_utf8_continuation_byte(text[offset]):
        return False
    # A sequence is at most 4 bytes long, so its lead byte is at most 3 bytes back.
    lead_offset = offset - 1
    while lead_offset > max(offset - 3, 0) and _is_utf8_continuation_byte(text[lead_offset]):
        lead_offset -= 1
    lead_byte: Final = text[lead_offset]
    if _is_utf8_continuation_byte(lead_byte):
        return False  # Stray continuation bytes.
    return lead_offset + _utf8_sequence_length(lead_byte) > offset


@final
class LineIndex:
    def __init__(
        self,
        text: TextSlice,
        *,
        policy: IndexingPolicy,
        cluster_counter: Optional[ClusterCounter],
    ) -> None:
        if not isinstance(text, (str, bytes)):  # pyright: ignore[reportUnnecessaryIsInstance]
            msg: Final = f"Expected 'str' or 'bytes', got '{type(text).__name__}'."
            raise TypeError(msg)
        self._text: Final = text
        self._policy: Final = policy
        self._cluster_counter: Final = cluster_counter
        self._line_starts: Optional[tuple[int, ...]] = None
        self._lock: Final = threading.Lock()
        if policy == IndexingPolicy.EAGER:
            self._line_starts = self._index_lines()

    @classmethod
    def build(
        cls,
        text: TextSlice,
        policy: Optional[IndexingPolicy] = None,
        cluster_counter: Optional[ClusterCounter] = DEFAULT_CLUSTER_COUNTER,
    ) -> "LineIndex":
        """Creates an index for `text`.

        With `IndexingPolicy.EAGER` the text is scanned right away. With
        `IndexingPolicy.LAZY` the scan is deferred to the first query. When no
        policy is given, the configured default is used. Passing `None` as
        `cluster_counter` disables `locate_by_cluster()`.
        """
        return cls(
            text,
            policy=get_config().indexing_policy if policy is None else policy,
            cluster_counter=cluster_counter,
        )

    @property
    def text(self) -> TextSlice:
        return self._text

    @property
    def policy(self) -> IndexingPolicy:
        return self._policy

    @property
    def is_indexed(self) -> bool:
        return self._line_starts is not None

    @property
    def line_starts(self) -> tuple[int, ...]:
        return self._get_line_starts()

    @property
    def line_count(self) -> int:
        return len(self._get_line_starts())

    def locate(self, offset: int) -> Position:
        """Returns the 1-based line and column of `offset`.

        The column counts raw units (code points or bytes) from the start of
        the line. `offset` may be equal to the length of the text, which
        denotes the end of the last line.

        Raises `OffsetOutOfRangeError` if `offset` lies outside of the text.
        """
        line, line_start = self._find_line(offset)
        return Position(line=line, column=offset - line_start + 1)

    def locate_by_cluster(self, offset: int) -> Position:
        """Like `locate()`, but the column counts user-perceived characters.

        The column is one more than the number of grapheme clusters between
        the start of the line and `offset`. An offset inside of a cluster
        counts that cluster, so it reports the column following the cluster.
        This scans the line prefix on every call.
        """
        if self._cluster_counter is None:
            raise ClusterCountingUnavailableError()
        line, line_start = self._find_line(offset)
        prefix: Final = self._decoded_slice(line_start, offset)
        return Position(line=line, column=self._cluster_counter.count_clusters(prefix) + 1)

    def locate_range(self, offset: int, length: int) -> Range:
        if length < 0:
            msg: Final = f"Length must not be negative, got {length}."
            raise ValueError(msg)
        return Range(start=self.locate(offset), end=self.locate(offset + length))

    def _find_line(self, offset: int) -> tuple[int, int]:
        if offset < 0 or offset > len(self._text):
            raise OffsetOutOfRangeError(offset, len(self._text))
        line_starts: Final = self._get_line_starts()
        # The last line start that is not greater than `offset`.
        line_index: Final = bisect_right(line_starts, offset) - 1
        return line_index + 1, line_starts[line_index]

    def _decoded_slice(self, start: int, end: int) -> str:
        text: Final = self._text
        if isinstance(text, str):
            return text[start:end]
        if _splits_utf8_sequence(text, end):
            raise OffsetNotOnCharBoundaryError(end)
        return text[start:end].decode("utf-8", errors="replace")

    def _get_line_starts(self) -> tuple[int, ...]:
        line_starts: Final = self._line_starts
        if line_starts is not None:
            return line_starts
        with self._lock:
            # Another thread may have finished indexing while we were waiting.
            if self._line_starts is None:
                self._line_starts = self._index_lines()
            return self._line_starts

    def _index_lines(self) -> tuple[int, ...]:
        line_starts: Final = _collect_line_starts(self._text)
        logger.debug(
            f"Indexed {len(line_starts)} line(s) in a text of length {len(self._text)} ({self._policy} policy)."
        )
        return line_starts
