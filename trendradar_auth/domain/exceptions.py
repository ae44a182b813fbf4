"""
Domain exceptions.

Expected business failures travel as Result errors; these are raised for
conditions that cut across use cases.
"""


class ConfigurationError(Exception):
    """Required process configuration is missing or invalid"""


class StorageError(Exception):
    """The underlying store is unreachable or did not answer in time"""


class ForbiddenError(Exception):
    """Authenticated caller lacks the role for a (resource, action) pair"""

    def __init__(self, resource: str, action: str):
        self.resource = resource
        self.action = action
        super().__init__(f"Insufficient permissions to {action} {resource}")
