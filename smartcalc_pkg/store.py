"""Variable storage shared by every line of a session."""

from __future__ import annotations

from typing import Iterator

from .logging_config import get_logger

logger = get_logger("store")


class VariableStore:
    """Mapping from variable name to integer value.

    Names are case-sensitive. Entries are created on first assignment and
    overwritten afterwards; nothing is ever removed. One store is built at
    start-up and passed to every evaluation of the session.
    """

    def __init__(self, initial: dict[str, int] | None = None):
        self._values: dict[str, int] = dict(initial or {})

    def assign(self, name: str, value: int) -> None:
        previous = self._values.get(name)
        self._values[name] = value
        if previous is None:
            logger.debug("Defined %r = %d", name, value)
        else:
            logger.debug("Redefined %r = %d (was %d)", name, value, previous)

    def __getitem__(self, name: str) -> int:
        return self._values[name]

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def as_dict(self) -> dict[str, int]:
        return dict(self._values)

    def __repr__(self) -> str:
        return f"VariableStore({self._values!r})"
