"""Exceptions raised while loading documentation sources."""


class MalformedSourceError(ValueError):
    """A documentation payload could not be retrieved or has the wrong shape."""
