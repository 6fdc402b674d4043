"""Exceptions raised by the map and battle params parsers."""


class PsoMapperError(Exception):
    """Base exception for pso_mapper."""


class MapFormatError(PsoMapperError, ValueError):
    """Raised when a map buffer is not a whole number of enemy entries."""


class BattleParamsLoadError(PsoMapperError, OSError):
    """Raised when a BattleParamEntry file is too short to hold 4 tables."""


class BattleParamsLookupError(PsoMapperError, ValueError):
    """Raised for out-of-range episode, difficulty, or monster type lookups."""
