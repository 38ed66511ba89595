from typing import Final

import pytest
from pydantic import ValidationError

from linecol.diagnostics import Diagnostic
from linecol.diagnostics import Severity
from linecol.errors import OffsetOutOfRangeError
from linecol.line_index import LineIndex
from linecol.position import Position
from linecol.position import Range

_SOURCE: Final = "LET x = 1;\nPRINT y;\n"


def test_render_error_with_source_name() -> None:
    index: Final = LineIndex.build(_SOURCE)
    diagnostic: Final = Diagnostic(message="Variable 'y' is not defined.", offset=17, length=1)
    assert diagnostic.severity == Severity.ERROR
    assert diagnostic.render(index, "script.txt") == "script.txt:2:7: error: Variable 'y' is not defined."


@pytest.mark.parametrize(
    ("severity", "expected"),
    [
        (Severity.ERROR, "1:5: error: Unused variable."),
        (Severity.WARNING, "1:5: warning: Unused variable."),
        (Severity.NOTE, "1:5: note: Unused variable."),
    ],
)
def test_render_without_source_name(severity: Severity, expected: str) -> None:
    index: Final = LineIndex.build(_SOURCE)
    diagnostic: Final = Diagnostic(message="Unused variable.", severity=severity, offset=4, length=1)
    assert diagnostic.render(index) == expected


def test_diagnostic_at_end_of_text() -> None:
    index: Final = LineIndex.build(_SOURCE)
    diagnostic: Final = Diagnostic(message="Unexpected end of input.", offset=len(_SOURCE))
    assert diagnostic.position(index) == Position(line=3, column=1)


def test_diagnostic_source_location() -> None:
    index: Final = LineIndex.build(_SOURCE)
    location: Final = Diagnostic(message="x", offset=11, length=5).source_location(index)
    assert location.lexeme == "PRINT"
    assert location.range == Range(start=Position(2, 1), end=Position(2, 6))


def test_diagnostic_outside_of_text_raises() -> None:
    index: Final = LineIndex.build(_SOURCE)
    with pytest.raises(OffsetOutOfRangeError):
        Diagnostic(message="x", offset=len(_SOURCE) + 1).render(index)


@pytest.mark.parametrize(("offset", "length"), [(-1, 0), (0, -1)])
def test_diagnostic_rejects_negative_values(offset: int, length: int) -> None:
    with pytest.raises(ValidationError):
        Diagnostic(message="x", offset=offset, length=length)


def test_diagnostic_is_frozen() -> None:
    diagnostic: Final = Diagnostic(message="x", offset=0)
    with pytest.raises(ValidationError):
        diagnostic.offset = 1  # type: ignore[misc]
