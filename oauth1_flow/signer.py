import base64
import os
import time

from oauth1_flow.base_string import (encode_parameters, sort_parameters,
                                     signature_base)
from oauth1_flow.params import collect_parameters
from oauth1_flow.signature import SignatureMethod_HMAC_SHA1

AUTHORIZATION_HEADER = 'Authorization'
AUTHORIZATION_PREFIX = 'OAuth '  # trailing space is intentional
OAUTH_VERSION = '1.0'

OAUTH_CONSUMER_KEY = 'oauth_consumer_key'
OAUTH_NONCE = 'oauth_nonce'
OAUTH_SIGNATURE = 'oauth_signature'
OAUTH_SIGNATURE_METHOD = 'oauth_signature_method'
OAUTH_TIMESTAMP = 'oauth_timestamp'
OAUTH_TOKEN = 'oauth_token'
OAUTH_VERSION_PARAM = 'oauth_version'
OAUTH_CALLBACK = 'oauth_callback'
OAUTH_VERIFIER = 'oauth_verifier'


def random_nonce():
    """Return 32 random bytes, base64 encoded."""
    return base64.b64encode(os.urandom(32)).decode('ascii')


def auth_header_value(oauth_params):
    """Format OAuth parameters as an Authorization header (RFC 5849 3.5.1).

    Parameters are percent encoded, sorted by key and joined as
    ``key="value"`` pairs separated by ", ". ``oauth_params`` should
    already include ``oauth_signature``.
    """
    pairs = sort_parameters(encode_parameters(oauth_params), '%s="%s"')
    return AUTHORIZATION_PREFIX + ', '.join(pairs)


class Signer(object):
    """Signs requests for a consumer and sets their Authorization header.

    ``clock`` returns the current Unix time in seconds and ``noncer``
    returns a fresh nonce string; both are called once per signed request.
    A Signer keeps no state between calls and can be shared between
    threads.
    """

    def __init__(self, config, clock=None, noncer=None,
                 signature_method=None):
        self.config = config
        self.clock = clock or time.time
        self.noncer = noncer or random_nonce
        self.signature_method = signature_method or SignatureMethod_HMAC_SHA1()

    def common_oauth_params(self):
        """Protocol parameters shared by every request, minus the signature."""
        return {
            OAUTH_CONSUMER_KEY: self.config.consumer_key,
            OAUTH_SIGNATURE_METHOD: self.signature_method.name,
            OAUTH_TIMESTAMP: str(int(self.clock())),
            OAUTH_NONCE: self.noncer(),
            OAUTH_VERSION_PARAM: OAUTH_VERSION,
        }

    def set_request_token_auth_header(self, request):
        """Sign a temporary credential request (RFC 5849 2.1)."""
        oauth_params = self.common_oauth_params()
        oauth_params[OAUTH_CALLBACK] = self.config.callback_url or ''
        self._sign(request, oauth_params, '')

    def set_access_token_auth_header(self, request, request_token,
                                     request_secret, verifier):
        """Sign a token credential request (RFC 5849 2.3)."""
        oauth_params = self.common_oauth_params()
        oauth_params[OAUTH_TOKEN] = request_token
        oauth_params[OAUTH_VERIFIER] = verifier
        self._sign(request, oauth_params, request_secret)

    def set_request_auth_header(self, request, access_token):
        """Sign a request made on behalf of the owner of ``access_token``
        (RFC 5849 3.1).
        """
        oauth_params = self.common_oauth_params()
        oauth_params[OAUTH_TOKEN] = access_token.token
        self._sign(request, oauth_params, access_token.token_secret)

    def signature(self, request, oauth_params, token_secret):
        params = collect_parameters(request, oauth_params)
        base = signature_base(request, params)
        return self.signature_method.sign(self.config.consumer_secret,
                                          token_secret, base)

    def _sign(self, request, oauth_params, token_secret):
        oauth_params[OAUTH_SIGNATURE] = self.signature(request, oauth_params,
                                                       token_secret)
        request.set_header(AUTHORIZATION_HEADER,
                           auth_header_value(oauth_params))
