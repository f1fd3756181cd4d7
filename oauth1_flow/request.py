import io

from urllib.parse import urlsplit

FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'


class Request(object):
    """An HTTP request to be signed, or an inbound callback request.

    ``body`` may be ``None``, ``str``, ``bytes`` or a readable file-like
    object. Reading a file-like body through ``read_body`` puts an
    in-memory copy back so the request can still be sent afterwards.
    """

    def __init__(self, method, url, headers=None, body=None):
        self.method = method
        self.url = url
        self.headers = dict(headers or {})
        self.body = body

    def __repr__(self):
        return '<Request %s %s>' % (self.method, self.url)

    @property
    def query(self):
        return urlsplit(self.url).query

    def get_header(self, name, default=None):
        name = name.lower()
        for key, value in self.headers.items():
            if key.lower() == name:
                return value
        return default

    def set_header(self, name, value):
        for key in list(self.headers):
            if key.lower() == name.lower():
                del self.headers[key]
        self.headers[name] = value

    def has_form_body(self):
        return (self.body is not None and
                self.get_header('Content-Type') == FORM_CONTENT_TYPE)

    def read_body(self):
        """Return the body contents, leaving the body replayable."""
        if not hasattr(self.body, 'read'):
            return self.body
        data = self.body.read()
        if isinstance(data, bytes):
            self.body = io.BytesIO(data)
        else:
            self.body = io.StringIO(data)
        return data
