from typing import Final
from typing import final


class LineColError(Exception): ...


@final
class OffsetOutOfRangeError(LineColError, IndexError):
    def __init__(self, offset: int, text_length: int) -> None:
        super().__init__(f"Offset {offset} is out of range for a text of length {text_length}.")
        self.offset: Final = offset
        self.text_length: Final = text_length


@final
class OffsetNotOnCharBoundaryError(LineColError, ValueError):
    def __init__(self, offset: int) -> None:
        super().__init__(f"Offset {offset} does not lie on a UTF-8 character boundary.")
        self.offset: Final = offset


@final
class ClusterCountingUnavailableError(LineColError, RuntimeError):
    def __init__(self) -> None:
        super().__init__("This line index was built without a cluster counter.")


@final
class InvalidConfigurationError(LineColError, ValueError):
    def __init__(self, key: str, value: str, allowed: list[str]) -> None:
        super().__init__(f"Invalid value '{value}' for '{key}', expected one of: {', '.join(allowed)}.")
        self.key: Final = key
        self.value: Final = value
