import logging
from enum import StrEnum
from enum import auto
from typing import Annotated
from typing import Final
from typing import Optional
from typing import final

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from linecol.line_index import LineIndex
from linecol.position import Position
from linecol.position import SourceLocation

logger: Final = logging.getLogger(__name__)


@final
class Severity(StrEnum):
    ERROR = auto()
    WARNING = auto()
    NOTE = auto()


@final
class Diagnostic(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    offset: Annotated[int, Field(ge=0)]
    length: Annotated[int, Field(ge=0)] = 0
    severity: Severity = Severity.ERROR

    def source_location(self, index: LineIndex) -> SourceLocation:
        return SourceLocation(line_index=index, offset=self.offset, length=self.length)

    def position(self, index: LineIndex) -> Position:
        return index.locate(self.offset)

    def render(self, index: LineIndex, source_name: Optional[str] = None) -> str:
        position: Final = self.position(index)
        prefix: Final = "" if source_name is None else f"{source_name}:"
        rendered: Final = f"{prefix}{position.line}:{position.column}: {self.severity}: {self.message}"
        logger.debug(f"Rendered diagnostic: {rendered}")
        return rendered
