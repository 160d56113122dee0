"""Configuration shared by the real-to-real transform plans."""

from enum import Enum


class Normalization(Enum):
    """Output scaling applied by a transform plan."""

    NONE = 0
    ORTHO = 1

    def is_ortho(self) -> bool:
        """Return True when orthonormal scaling is selected."""
        return self is Normalization.ORTHO