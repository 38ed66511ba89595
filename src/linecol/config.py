import os
from pathlib import Path
from typing import Final
from typing import Optional
from typing import final

from dotenv import dotenv_values

from linecol.errors import InvalidConfigurationError
from linecol.indexing_policy import IndexingPolicy

INDEXING_POLICY_ENV_VARIABLE = "LINECOL_INDEXING_POLICY"


def get_environment_variable_or_default(
    key: str,
    default: str | None,
    env_file_values: Optional[dict[str, Optional[str]]] = None,
) -> str | None:
    value = os.getenv(key)
    if value is None and env_file_values is not None:
        value = env_file_values.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _parse_indexing_policy(value: str) -> IndexingPolicy:
    try:
        return IndexingPolicy(value.lower())
    except ValueError as e:
        raise InvalidConfigurationError(
            INDEXING_POLICY_ENV_VARIABLE,
            value,
            [policy.value for policy in IndexingPolicy],
        ) from e


@final
class Config:
    _ENV_FILE_PATH = Path(os.getcwd()) / ".env"

    def __init__(self) -> None:
        self._indexing_policy: Optional[IndexingPolicy] = None
        self.reload()

    def reload(self) -> None:
        # The process environment wins over the .env file, which is read without exporting it.
        env_file_values: Final = dotenv_values(self._ENV_FILE_PATH)
        indexing_policy: Final = get_environment_variable_or_default(
            INDEXING_POLICY_ENV_VARIABLE,
            None,
            env_file_values,
        )
        if indexing_policy is None:
            self._indexing_policy = IndexingPolicy.EAGER
        else:
            self._indexing_policy = _parse_indexing_policy(indexing_policy)

    @property
    def indexing_policy(self) -> IndexingPolicy:
        if self._indexing_policy is None:
            raise AssertionError("Indexing policy is not set. This should not happen.")
        return self._indexing_policy


_config: Optional[Config] = None


def get_config() -> Config:
    global _config
    if _config is None:
        _config = Config()
    return _config
