from typing import TYPE_CHECKING
from typing import Final
from typing import NamedTuple
from typing import final

from linecol.errors import OffsetOutOfRangeError

if TYPE_CHECKING:
    from linecol.line_index import LineIndex


@final
class Position(NamedTuple):
    line: int
    column: int


@final
class Range(NamedTuple):
    start: Position
    end: Position  # Exclusive.


@final
class SourceLocation(NamedTuple):
    line_index: "LineIndex"
    offset: int
    length: int

    @property
    def lexeme(self) -> str | bytes:
        text: Final = self.line_index.text
        if self.offset < 0:
            raise OffsetOutOfRangeError(self.offset, len(text))
        if self.offset >= len(text):
            return text[:0]
        return text[self.offset : self.offset + self.length]

    @property
    def range(self) -> Range:
        # Cut off at the end of the text, like `lexeme`.
        text_length: Final = len(self.line_index.text)
        start: Final = self.line_index.locate(self.offset)
        return Range(start=start, end=self.line_index.locate(min(self.offset + self.length, text_length)))
