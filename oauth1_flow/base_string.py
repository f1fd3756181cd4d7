from urllib.parse import urlsplit

import httplib2

from oauth1_flow.encoding import percent_encode

DEFAULT_PORTS = {
    'http': '80',
    'https': '443',
}


def encode_parameters(params):
    """Percent encode keys and values into a new dict (RFC 5849 3.6)."""
    return dict((percent_encode(key), percent_encode(value))
                for key, value in params.items())


def sort_parameters(params, pair_format='%s=%s'):
    """Return ``pair_format`` strings for params sorted by key."""
    return [pair_format % (key, params[key]) for key in sorted(params)]


def base_uri(url):
    """Return the base string URI of RFC 5849 3.4.1.2.

    Scheme and host are lowercased, the port is dropped when it is the
    default one for the scheme, query and fragment are left out and the
    path is kept as given, escapes included. Non-ASCII characters are
    escaped the way httplib2 escapes them on the wire.
    """
    parts = urlsplit(httplib2.iri2uri(url))
    scheme = parts.scheme.lower()
    host = parts.netloc.rpartition('@')[2].lower()
    name, sep, port = host.rpartition(':')
    if sep and ']' not in port and DEFAULT_PORTS.get(scheme) == port:
        host = name
    return '%s://%s%s' % (scheme, host, parts.path)


def normalized_parameter_string(params):
    """Encode, sort and join collected parameters (RFC 5849 3.4.1.3.2).

    e.g. ``{'q': 'a b', 'foo': 'bar'}`` gives ``foo=bar&q=a%20b``.
    """
    return '&'.join(sort_parameters(encode_parameters(params)))


def signature_base(request, params):
    """Build the signature base string of RFC 5849 3.4.1.1.

    ``params`` are the collected request parameters, which must exclude
    ``oauth_signature``.
    """
    parts = [
        request.method.upper(),
        percent_encode(base_uri(request.url)),
        percent_encode(normalized_parameter_string(params)),
    ]
    return '&'.join(parts)
