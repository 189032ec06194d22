"""Exception hierarchy for the position engine."""


class RealZodiacError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(RealZodiacError):
    """Invalid engine settings."""


class ZodiacTableError(RealZodiacError):
    """The constellation boundary table does not tile [0, 360)."""


class ClassificationError(RealZodiacError):
    """A right ascension matched no constellation segment."""


class EphemerisUnavailableError(RealZodiacError):
    """The high-precision ephemeris could not be loaded."""


class InvalidQueryError(RealZodiacError):
    """User input could not be turned into a timestamp or observer."""
