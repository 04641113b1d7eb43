"""
Request errors raised by the validation pipelines. Each carries the HTTP status and the
message sent back to the client as {"error": message}.
"""


class GrubDashError(Exception):
    """Base class for request-local failures. Never leaves a store half-modified."""
    status_code: int = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingField(GrubDashError):
    """A required payload field is absent or empty."""
    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class InvalidValue(GrubDashError):
    """A payload field is present but has the wrong shape or range."""
    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class IdMismatch(GrubDashError):
    def __init__(self, payload_id, route_id: str, resource: str):
        self.payload_id = payload_id
        self.route_id = route_id
        super().__init__(
            f"{resource} id does not match route id. {resource}: {payload_id}, Route: {route_id}"
        )


class NotFound(GrubDashError):
    status_code = 404

    def __init__(self, record_id, resource: str):
        self.record_id = record_id
        super().__init__(f"{resource} does not exist: {record_id}")


class InvalidTransition(GrubDashError):
    """The order's current status forbids the requested change."""
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
