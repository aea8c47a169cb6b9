"""
Error taxonomy for the discovery pipeline.

None of these reach the presentation layer except ``EmptyQuery``, which is a
caller-side guard. The gateway and the normalizer absorb the rest.
"""


class DiscoveryError(Exception):
    """Base class for discovery pipeline errors"""


class EmptyQuery(DiscoveryError):
    """A discovery was requested with a blank query"""


class OracleUnavailable(DiscoveryError):
    """The generative oracle could not be reached or refused the call"""


class MalformedResponse(DiscoveryError):
    """The oracle answered with text that is not the expected JSON array"""


class PartialRecord(DiscoveryError):
    """A single raw record is missing a required field or has a bad value"""

    def __init__(self, message: str, record_id: str = None):
        super().__init__(message)
        self.record_id = record_id


def require_query(query: str) -> str:
    """Return the trimmed query or raise EmptyQuery if nothing is left"""
    trimmed = query.strip() if isinstance(query, str) else ''
    if not trimmed:
        raise EmptyQuery("Query is required")
    return trimmed
