class SpawnTilesError(Exception):
    """Base error for tile list generation."""


class ConfigError(SpawnTilesError):
    """Raised when a map, spawn config or save file is structurally invalid."""


class UnknownMapError(SpawnTilesError, KeyError):
    """Raised when a spawn area names a map that was never loaded."""


class RangeStringError(SpawnTilesError, ValueError):
    """Raised when an include/exclude coordinate string cannot be parsed."""

    def __init__(self, text: str, reason: str = "expected 'x,y' or 'x1,y1/x2,y2'"):
        self.text = text
        self.reason = reason
        super().__init__(f"Malformed coordinate range {text!r}: {reason}")
