from enum import StrEnum
from enum import auto
from typing import final


@final
class IndexingPolicy(StrEnum):
    EAGER = auto()  # Line starts are collected inside `LineIndex.build()`.
    LAZY = auto()  # Line starts are collected on the first query and cached.
