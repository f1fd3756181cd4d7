from unittest import mock

import httplib2
import pytest

from oauth1_flow import Request, Token
from oauth1_flow.exceptions import (CallbackError, ImproperlyConfigured,
                                    NotAuthorized, ServiceFail)
from oauth1_flow.handlers import HANDLERS, get_handler
from oauth1_flow.handlers.twitter import TwitterHandler


SETTINGS = {
    'twitter': {
        'KEY': 'ck',
        'SECRET': 'cs',
        'CALLBACK_URL': 'https://consumer.example/callback',
    },
}


def test_get_handler():
    handler = get_handler('twitter', settings=SETTINGS)
    assert isinstance(handler, TwitterHandler)
    assert handler.config.consumer_key == 'ck'
    assert handler.config.callback_url == 'https://consumer.example/callback'
    assert handler.endpoint.request_token_url == \
        'https://api.twitter.com/oauth/request_token'


@pytest.mark.parametrize('service', [name for name, _ in HANDLERS])
def test_all_handlers_have_endpoints(service):
    handler = get_handler(service, settings={service: {'KEY': 'k',
                                                       'SECRET': 's'}})
    assert handler.SERVICE == service
    assert all(url.startswith('https://') for url in handler.endpoint)


def test_unknown_service():
    with pytest.raises(ImproperlyConfigured):
        get_handler('myspace')


def test_missing_settings():
    handler = get_handler('twitter', settings={'twitter': {'KEY': 'ck'}})
    with pytest.raises(ImproperlyConfigured):
        handler.config


def test_redirect_uri_overrides_settings():
    handler = get_handler('twitter', settings=SETTINGS,
                          redirect_uri='https://other.example/cb')
    assert handler.config.callback_url == 'https://other.example/cb'


def test_auth_url_and_complete(signer, fake_http):
    http = fake_http(
        (200, b'oauth_token=rt&oauth_token_secret=rs'
              b'&oauth_callback_confirmed=true'),
        (200, b'oauth_token=at&oauth_token_secret=as'),
    )
    settings = dict(SETTINGS)
    settings['twitter'] = dict(SETTINGS['twitter'],
                               EXTRA_ARGUMENTS={'force_login': 'true'})
    handler = get_handler('twitter', settings=settings, http=http,
                          signer=signer)

    url, request_token = handler.auth_url()
    assert url == ('https://api.twitter.com/oauth/authenticate'
                   '?oauth_token=rt&force_login=true')
    assert request_token == Token('rt', 'rs')

    callback = Request('GET', 'https://consumer.example/callback'
                              '?oauth_token=rt&oauth_verifier=v')
    access_token = handler.auth_complete(request_token.to_string(), callback)
    assert access_token == Token('at', 'as')
    assert 'oauth_verifier="v"' in http.requests[1]['headers']['Authorization']


def test_auth_complete_token_mismatch(fake_http):
    handler = get_handler('twitter', settings=SETTINGS, http=fake_http())
    with pytest.raises(CallbackError):
        handler.auth_complete(Token('rt', 'rs'),
                              {'oauth_token': 'other', 'oauth_verifier': 'v'})


def test_auth_complete_without_token():
    handler = get_handler('twitter', settings=SETTINGS)
    with pytest.raises(CallbackError):
        handler.auth_complete(None, {})


def make_call(status, content, **kwargs):
    handler = get_handler('twitter', settings=SETTINGS)
    with mock.patch.object(httplib2.Http, 'request') as request:
        request.return_value = (httplib2.Response({'status': str(status)}),
                                content)
        result = handler.make_api_call(
            kwargs.pop('kind', 'json'), 'https://api.twitter.com/1.1/x.json',
            'oauth_token=at&oauth_token_secret=as', **kwargs)
    return result, request


def test_make_api_call_json():
    result, request = make_call(200, b'{"id": 42}')
    assert result == {'id': 42}
    kwargs = request.call_args[1]
    assert kwargs['method'] == 'GET'
    assert 'oauth_token="at"' in kwargs['headers']['Authorization']


def test_make_api_call_post():
    result, request = make_call(200, b'done', kind='raw', method='POST',
                                params={'status': 'hello world'})
    assert result == b'done'
    kwargs = request.call_args[1]
    assert kwargs['body'] == 'status=hello+world'
    assert kwargs['headers']['Content-Type'] == \
        'application/x-www-form-urlencoded'


def test_make_api_call_unauthorized():
    with pytest.raises(NotAuthorized):
        make_call(401, b'nope')


def test_make_api_call_no_content():
    with pytest.raises(ServiceFail):
        make_call(200, b'')


def test_make_api_call_unsupported_kind():
    with pytest.raises(ValueError):
        make_call(200, b'<x/>', kind='xml')
