class ImproperlyConfigured(Exception):
    pass


class ServiceFail(Exception):
    """Provider answered with a non-2xx status or an unusable body."""

    def __init__(self, message, status=None, content=None):
        super(ServiceFail, self).__init__(message)
        self.status = status
        self.content = content


class NotAuthorized(ServiceFail):
    pass


class InvalidResponse(Exception):
    """Provider response is not form encoded or lacks a required field."""


class MalformedRequest(ValueError):
    """Request query or form body could not be parsed for signing."""


class CallbackError(ValueError):
    pass
