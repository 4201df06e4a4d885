"""
Errors Module - Request-scoped error taxonomy

Every failure is scoped to a single request and reported to the caller;
none of these stop the process.
"""


class AppError(Exception):
    """Base class for errors reported back to the caller"""

    status_code = 500
    error = 'error'
    retryable = False

    def __init__(self, message, fields=None):
        super().__init__(message)
        self.message = message
        self.fields = fields or []

    def to_dict(self):
        return {
            'error': self.error,
            'message': self.message,
            'fields': self.fields,
            'retryable': self.retryable,
        }

    def field_messages(self):
        """Map field name -> first message, for inline form errors"""
        messages = {}
        for item in self.fields:
            messages.setdefault(item['field'], item['message'])
        return messages


class ValidationError(AppError):
    """A required field is missing or malformed"""
    status_code = 400
    error = 'validation_error'


class NotFoundError(AppError):
    status_code = 404
    error = 'not_found'


class ConflictError(AppError):
    """The write collides with an existing row (e.g. duplicate slug)"""
    status_code = 409
    error = 'conflict'


class TransientError(AppError):
    """Storage unavailable; the caller may resubmit the same input"""
    status_code = 503
    error = 'unavailable'
    retryable = True


__all__ = [
    'AppError',
    'ValidationError',
    'NotFoundError',
    'ConflictError',
    'TransientError'
]
