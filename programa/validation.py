"""Warning accumulation for partial parse failures."""


class ValidationCollector:
    """Ordered collection of non-fatal warnings.

    One collector is created per parse call and passed explicitly down the
    call chain, so no warning state is shared between documents.

    Example:
        >>> collector = ValidationCollector()
        >>> collector.warn("Meeting number not found; using 0.")
        >>> collector.warnings
        ('Meeting number not found; using 0.',)
    """

    def __init__(self) -> None:
        self._warnings: list[str] = []

    def warn(self, message: str) -> None:
        """Record one anomaly."""
        self._warnings.append(message)

    @property
    def warnings(self) -> tuple[str, ...]:
        """Snapshot of the warnings collected so far."""
        return tuple(self._warnings)

    def __len__(self) -> int:
        return len(self._warnings)

    def __iter__(self):
        return iter(tuple(self._warnings))
