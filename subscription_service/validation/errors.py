"""
Rejections produced while validating plan and payment requests.

Each one is caught by the route that triggered it and turned into a 400
response with ``to_response()``.
"""


class PlanRequestError(Exception):
    """Base class for request rejections."""

    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_response(self):
        """Body and status code for the API layer."""
        return {'message': self.message}, self.status_code


class ValidationError(PlanRequestError):
    """One or more field-level violations, reported together."""

    def __init__(self, errors):
        super().__init__('Validation failed')
        self.errors = list(errors)

    def to_response(self):
        return {'message': self.message, 'errors': self.errors}, self.status_code


class InvalidFieldError(PlanRequestError):
    """Fields submitted that the endpoint does not accept."""

    def __init__(self, invalid_fields, allowed_fields, message=None):
        self.invalid_fields = list(invalid_fields)
        self.allowed_fields = list(allowed_fields)
        if message is None:
            message = (
                f"Invalid fields: {', '.join(self.invalid_fields)}. "
                f"Only these fields can be edited: {', '.join(self.allowed_fields)}"
            )
        super().__init__(message)

    def to_response(self):
        return {
            'message': self.message,
            'invalid_fields': self.invalid_fields,
            'allowed_fields': self.allowed_fields,
        }, self.status_code


class WrongChannelError(PlanRequestError):
    """Editable fields sent to the general plan update endpoint."""

    def __init__(self, fields, endpoint):
        self.fields = list(fields)
        self.endpoint = endpoint
        super().__init__(f"Use {endpoint} endpoint to update: {', '.join(self.fields)}")

    def to_response(self):
        return {
            'message': self.message,
            'fields': self.fields,
            'endpoint': self.endpoint,
        }, self.status_code
