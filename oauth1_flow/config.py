import logging
from collections import namedtuple
from urllib.parse import urlencode, urlsplit, urlunsplit

import httplib2

from oauth1_flow.client import Client
from oauth1_flow.encoding import parse_form, first_values
from oauth1_flow.exceptions import (CallbackError, ImproperlyConfigured,
                                    InvalidResponse, NotAuthorized,
                                    ServiceFail)
from oauth1_flow.params import collect_parameters
from oauth1_flow.request import Request
from oauth1_flow.signer import Signer, OAUTH_TOKEN, OAUTH_VERIFIER

logger = logging.getLogger(__name__)

OAUTH_TOKEN_SECRET = 'oauth_token_secret'
OAUTH_CALLBACK_CONFIRMED = 'oauth_callback_confirmed'


class Endpoint(namedtuple('Endpoint', 'request_token_url authorize_url '
                                      'access_token_url')):
    """OAuth1 provider endpoint URLs."""
    __slots__ = ()


class Token(namedtuple('Token', 'token token_secret')):
    """A token and its secret, either temporary or an access token."""
    __slots__ = ()

    def to_string(self):
        return urlencode([(OAUTH_TOKEN, self.token),
                          (OAUTH_TOKEN_SECRET, self.token_secret)])

    @classmethod
    def from_string(cls, s):
        values = parse_response(s)
        return cls(*require_token(values, 'token string'))


def parse_response(content):
    """Parse a form encoded provider response body into a dict."""
    try:
        return first_values(parse_form(content))
    except ValueError as e:
        raise InvalidResponse('response is not form encoded: %s' % e)


def require_token(values, what):
    token = values.get(OAUTH_TOKEN, '')
    secret = values.get(OAUTH_TOKEN_SECRET, '')
    if not token or not secret:
        raise InvalidResponse('%s missing oauth token or secret' % what)
    return token, secret


def check_status(url, response, content):
    if response.status == 401:
        raise NotAuthorized('%s returned 401' % url, response.status, content)
    if not 200 <= response.status < 300:
        raise ServiceFail('%s returned %s' % (url, response.status),
                          response.status, content)


class Config(namedtuple('Config', 'consumer_key consumer_secret callback_url '
                                  'endpoint')):
    """An OAuth1 consumer's key and secret, its callback URL and the
    provider Endpoint it talks to.
    """
    __slots__ = ()

    def __new__(cls, consumer_key, consumer_secret, callback_url=None,
                endpoint=None):
        return super(Config, cls).__new__(cls, consumer_key, consumer_secret,
                                          callback_url, endpoint)

    def signer(self, **kwargs):
        return Signer(self, **kwargs)

    def client(self, token, **kwargs):
        """Return an httplib2 client signing requests with ``token``."""
        return Client(self, token, **kwargs)

    def _endpoint_url(self, name):
        if self.endpoint is None:
            raise ImproperlyConfigured('Config has no provider Endpoint')
        return getattr(self.endpoint, name)

    def _post(self, url, sign, http):
        request = Request('POST', url)
        sign(request)
        owned = http is None
        if owned:
            http = httplib2.Http()
        logger.debug('POST %s', url)
        try:
            response, content = http.request(url, method=request.method,
                                             body=request.body,
                                             headers=request.headers)
        finally:
            if owned:
                http.close()
        logger.debug('%s responded %s', url, response.status)
        check_status(url, response, content)
        return parse_response(content)

    def request_token(self, http=None, signer=None):
        """Obtain a temporary credential (RFC 5849 2.1).

        POSTs to the Endpoint's request token URL with ``oauth_callback``
        in the Authorization header and returns ``(token, secret)``. The
        response must confirm the callback.
        """
        signer = signer or self.signer()
        url = self._endpoint_url('request_token_url')
        values = self._post(url, signer.set_request_token_auth_header, http)
        if values.get(OAUTH_CALLBACK_CONFIRMED) != 'true':
            logger.warning('%s did not confirm the callback', url)
            raise InvalidResponse('oauth_callback_confirmed was not true')
        return require_token(values, 'request token response')

    def authorization_url(self, request_token):
        """Return the URL of the page where the resource owner authorizes
        the consumer (RFC 5849 2.2).
        """
        parts = urlsplit(self._endpoint_url('authorize_url'))
        token_param = urlencode([(OAUTH_TOKEN, request_token)])
        query = '&'.join(q for q in (parts.query, token_param) if q)
        return urlunsplit(parts._replace(query=query))

    def handle_authorization_callback(self, request):
        """Return ``(request_token, verifier)`` from the provider callback.

        ``request`` is either a Request, whose query and form body are read,
        or a mapping of already parsed callback parameters.
        """
        if isinstance(request, Request):
            values = collect_parameters(request, {})
        else:
            values = request
        request_token = values.get(OAUTH_TOKEN)
        verifier = values.get(OAUTH_VERIFIER)
        if not request_token or not verifier:
            raise CallbackError(
                'callback did not receive an oauth_token or oauth_verifier')
        return request_token, verifier

    def access_token(self, request_token, request_secret, verifier,
                     http=None, signer=None):
        """Exchange an authorized temporary credential for a token
        credential (RFC 5849 2.3). Returns ``(token, secret)``.
        """
        signer = signer or self.signer()

        def sign(request):
            signer.set_access_token_auth_header(request, request_token,
                                                request_secret, verifier)

        url = self._endpoint_url('access_token_url')
        values = self._post(url, sign, http)
        return require_token(values, 'access token response')
