import json
import logging
import sys
from urllib.parse import urlencode

from oauth1_flow.config import Config, Endpoint, Token, check_status
from oauth1_flow.exceptions import (CallbackError, ImproperlyConfigured,
                                    ServiceFail)
from oauth1_flow.request import FORM_CONTENT_TYPE

logger = logging.getLogger(__name__)


HANDLERS = (
    ('twitter', 'oauth1_flow.handlers.twitter.TwitterHandler'),
    ('yahoo', 'oauth1_flow.handlers.yahoo.YahooHandler'),
    ('tumblr', 'oauth1_flow.handlers.tumblr.TumblrHandler'),
)


def import_module(name):
    """
    Simplified version of import_module from Django,
    supports only absolute imports.
    """
    __import__(name)
    return sys.modules[name]


def get_handler(service, **kwargs):
    handlers = kwargs.pop('handlers', HANDLERS)
    # exctract settings for individual service
    settings = kwargs.pop('settings', {}).get(service, {})
    handler_module = dict(handlers).get(service, None)
    if handler_module:
        module, handler = handler_module.rsplit('.', 1)
        handler_class = getattr(import_module(module), handler)
        handler_instance = handler_class(settings=settings, **kwargs)
        return handler_instance
    raise ImproperlyConfigured('No handler for service %s' % service)


class ConsumerBasedOAuth(object):
    """Consumer based mechanism OAuth authentication, fill the needed
    parameters to communicate properly with authentication service.

        @AUTHORIZATION_URL       Authorization service url
        @REQUEST_TOKEN_URL       Request token URL
        @ACCESS_TOKEN_URL        Access token URL
    """
    AUTHORIZATION_URL = ''
    REQUEST_TOKEN_URL = ''
    ACCESS_TOKEN_URL = ''
    SERVICE = None

    def __init__(self, redirect_uri=None, http=None, signer=None, **kwargs):
        self.settings = kwargs.get('settings', {})
        self.redirect_uri = redirect_uri or self.settings.get('CALLBACK_URL')
        self.http = http
        self.signer = signer

    def get_key_and_secret(self):
        """Return tuple with Consumer Key and Consumer Secret for current
        service provider. Must return (key, secret), order *must* be respected.
        """
        try:
            return self.settings['KEY'], self.settings['SECRET']
        except KeyError as e:
            raise ImproperlyConfigured('%s setting %s is missing'
                                       % (self.SERVICE, e))

    def auth_extra_arguments(self):
        return self.settings.get('EXTRA_ARGUMENTS', {})

    @property
    def endpoint(self):
        return Endpoint(self.REQUEST_TOKEN_URL, self.AUTHORIZATION_URL,
                        self.ACCESS_TOKEN_URL)

    @property
    def config(self):
        """Setups consumer"""
        key, secret = self.get_key_and_secret()
        return Config(key, secret, self.redirect_uri, self.endpoint)

    def auth_url(self):
        """Return redirect url and the unauthorized token to keep until the
        provider calls back.
        """
        config = self.config
        token = Token(*config.request_token(http=self.http,
                                            signer=self.signer))
        url = config.authorization_url(token.token)
        extra = self.auth_extra_arguments()
        if extra:
            url += '&' + urlencode(extra)
        logger.debug('%s authorization url issued', self.SERVICE)
        return url, token

    def auth_complete(self, unauthed_token, data):
        """Return access token for the callback ``data`` (a Request or a
        mapping of its parameters).
        """
        if not unauthed_token:
            raise CallbackError('Missing unauthorized token')
        if not isinstance(unauthed_token, Token):
            unauthed_token = Token.from_string(unauthed_token)

        config = self.config
        token, verifier = config.handle_authorization_callback(data)
        if token != unauthed_token.token:
            raise CallbackError('Incorrect tokens')

        return Token(*config.access_token(unauthed_token.token,
                                          unauthed_token.token_secret,
                                          verifier, http=self.http,
                                          signer=self.signer))

    def _process_response(self, kind, response, content):
        check_status(self.SERVICE, response, content)
        if not content:
            raise ServiceFail("no content", response.status, content)
        if kind == "raw":
            return content
        elif kind == "json":
            return json.loads(content)
        else:
            raise ValueError("unsupported API kind %s" % kind)

    def make_api_call(self, kind, url, token, method="GET", **kwargs):
        if isinstance(token, str):
            token = Token.from_string(token)
        client = self.config.client(token, signer=self.signer)
        request_kwargs = dict(method=method)
        if method == "POST":
            request_kwargs["body"] = urlencode(kwargs.get("params", {}))
            request_kwargs["headers"] = {'Content-Type': FORM_CONTENT_TYPE}
        response, content = client.request(url, **request_kwargs)
        return self._process_response(kind, response, content)
