"""Latest-request-wins guard for re-issuable async loads."""


class RequestGeneration:
    """
    Monotonic counter identifying the current logical request.

    A load takes a token with ``next()`` before its first await and checks
    ``is_current(token)`` after every await; a superseded load keeps running
    but must not publish its results.
    """

    def __init__(self) -> None:
        self._current = 0

    @property
    def current(self) -> int:
        return self._current

    def next(self) -> int:
        """Start a new request, superseding any in flight."""
        self._current += 1
        return self._current

    def is_current(self, token: int) -> bool:
        return token == self._current

    def invalidate(self) -> None:
        """Supersede the in-flight request without starting a new one."""
        self._current += 1
