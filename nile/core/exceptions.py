"""
Domain errors raised by repositories and services.

Controllers translate these into HTTP responses (see nile.api.errors);
nothing below this layer knows about status codes.
"""


class NileError(Exception):
    """Base class for every error the service layer raises on purpose"""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(NileError):
    """The requested id has no record"""

    code = "NOT_FOUND"

    def __init__(self, resource: str, entity_id):
        super().__init__(f"{resource} {entity_id} not found")
        self.resource = resource
        self.entity_id = entity_id


class ReferenceNotFoundError(NotFoundError):
    """A foreign-key id in the payload does not resolve"""

    code = "REFERENCE_NOT_FOUND"

    def __init__(self, resource: str, entity_id):
        super().__init__(resource, entity_id)
        self.message = f"Referenced {resource} {entity_id} not found"
        self.args = (self.message,)


class ConflictError(NileError):
    """A unique constraint would be violated (e.g. duplicate transaction_id)"""

    code = "CONFLICT"


class PersistenceError(NileError):
    """Generic store failure"""

    code = "PERSISTENCE_FAILURE"


class InvalidPayloadError(NileError):
    """A payload value the schema accepts but the entity cannot hold (e.g. null for a required field)"""

    code = "INVALID_PAYLOAD"
