class GeoSparqlError(ValueError):
    """Base class for errors raised while converting GeoSPARQL literals."""


class CoordinateParseError(GeoSparqlError):
    """A coordinate payload holds something that is not a number."""

    def __init__(self, literal: str, token: str, reason: str = 'not a number'):
        self.literal = literal
        self.token = token
        self.reason = reason
        super().__init__(f'Invalid coordinate {token!r} in {literal!r}: {reason}')
