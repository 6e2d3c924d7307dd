class BetCheckError(Exception):
    """Base error for betcheck."""


class RegistryLoadError(BetCheckError):
    """The registry feed could not be read or fetched."""

    def __init__(self, source: str, message: str):
        super().__init__(f"Could not load registry from {source}: {message}")
        self.source = source
