"""Sequential identifier generation."""


class IDFactory:
    """Hands out increasing integer identifiers, starting from a given value."""

    def __init__(self, start: int = 0) -> None:
        self._counter = start

    def next_id(self) -> int:
        """Return the current identifier and advance the counter."""
        value = self._counter
        self._counter += 1
        return value