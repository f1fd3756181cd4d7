from oauth1_flow.encoding import parse_form, first_values
from oauth1_flow.exceptions import MalformedRequest


def collect_parameters(request, oauth_params):
    """Collect the parameters that go into the signature base string.

    Query parameters, the form encoded body (only when the Content-Type is
    exactly application/x-www-form-urlencoded) and the OAuth protocol
    parameters are merged in that order, later sources overwriting earlier
    ones. This follows RFC 5849 3.4.1.3 except that duplicate keys are not
    supported: only the first value of a key within a source is kept.

    ``oauth_params`` must not contain ``oauth_signature``.
    """
    try:
        params = first_values(parse_form(request.query))
    except ValueError as e:
        raise MalformedRequest('invalid query in %s: %s' % (request.url, e))

    if request.has_form_body():
        body = request.read_body()
        try:
            params.update(first_values(parse_form(body)))
        except ValueError as e:
            raise MalformedRequest('invalid form body: %s' % e)

    params.update(oauth_params)
    return params
