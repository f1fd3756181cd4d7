import re
from urllib.parse import quote, unquote_plus

_BAD_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')


def percent_encode(value):
    """Percent encode according to RFC 5849 3.6 and RFC 3986 2.1.

    Only the unreserved characters ``A-Z a-z 0-9 - . _ ~`` pass through,
    every other byte of the UTF-8 encoding becomes ``%XX`` (uppercase hex).
    Unlike ``urlencode`` a space is ``%20``, never ``+``.
    """
    return quote(value, safe='')


def _unescape(value):
    if _BAD_ESCAPE.search(value):
        raise ValueError('invalid percent escape in %r' % value)
    return unquote_plus(value, encoding='utf-8', errors='strict')


def parse_form(data):
    """Parse an application/x-www-form-urlencoded string.

    Returns a list of ``(key, value)`` pairs in their original order.
    Raises ``ValueError`` on malformed escapes or undecodable bytes.
    """
    if isinstance(data, bytes):
        data = data.decode('utf-8')
    pairs = []
    for field in data.split('&'):
        if not field:
            continue
        key, _, value = field.partition('=')
        pairs.append((_unescape(key), _unescape(value)))
    return pairs


def first_values(pairs):
    """Collapse parsed pairs to a dict keeping the first value of each key.

    Duplicate keys are not supported, later occurrences are dropped.
    """
    values = {}
    for key, value in pairs:
        values.setdefault(key, value)
    return values
