"""Error types raised by the link store and services.

Each error carries the HTTP status the web layer answers with.
"""


class LinkError(Exception):
    """Base class for link service errors."""
    
    status_code = 500


class NotFound(LinkError):
    """No link exists for the requested alias."""
    
    status_code = 404
    
    def __init__(self, alias: str):
        super().__init__(f"alias '{alias}' not found")
        self.alias = alias


class DuplicateAlias(LinkError):
    """A link with the same alias already exists."""
    
    status_code = 400
    
    def __init__(self, alias: str):
        super().__init__(f"alias '{alias}' already exists")
        self.alias = alias


class InvalidUrl(LinkError, ValueError):
    """The target is not a well-formed absolute URL."""
    
    status_code = 400


class InvalidAlias(LinkError, ValueError):
    """The alias cannot be used as a path segment."""
    
    status_code = 400


class StorageUnavailable(LinkError):
    """The backing store failed for a reason other than the above."""
    
    status_code = 500
