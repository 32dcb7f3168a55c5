"""Precision acceptance policy."""

from collections.abc import Iterable
from enum import Enum


class PrecisionMatchMode(str, Enum):
    """How a reported precision is tested against the acceptable set."""

    EXACT_MEMBERSHIP = "exact_membership"
    NON_EMPTY_ACCEPTS_ANY = "non_empty_accepts_any"


class PrecisionPolicy:
    """Decides whether a reported precision is within an acceptable set."""

    def __init__(
        self,
        acceptable: Iterable[str],
        mode: PrecisionMatchMode = PrecisionMatchMode.EXACT_MEMBERSHIP,
    ):
        self.acceptable = frozenset(acceptable)
        self.mode = mode

    def accepts(self, precision: str | None) -> bool:
        """Return True if ``precision`` passes this policy.

        An empty or missing precision never passes.
        """
        if not precision:
            return False
        if self.mode is PrecisionMatchMode.NON_EMPTY_ACCEPTS_ANY:
            return bool(self.acceptable)
        return precision in self.acceptable

    def __repr__(self) -> str:
        levels = ", ".join(sorted(self.acceptable))
        return f"PrecisionPolicy(mode={self.mode.value}, acceptable={{{levels}}})"
