import httplib2
import pytest

from oauth1_flow import Config, Endpoint, Signer


class FakeHttp(object):
    """Stands in for httplib2.Http, answering with canned responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []
        self.closed = False

    def request(self, uri, method="GET", body=None, headers=None):
        self.requests.append({'uri': uri, 'method': method, 'body': body,
                              'headers': headers})
        status, content = self.responses.pop(0)
        return httplib2.Response({'status': str(status)}), content

    def close(self):
        self.closed = True


@pytest.fixture
def fake_http():
    """Factory for transports answering ``(status, content)`` pairs in order."""
    return FakeHttp


@pytest.fixture
def endpoint():
    return Endpoint('https://provider.example/oauth/request_token',
                    'https://provider.example/oauth/authorize',
                    'https://provider.example/oauth/access_token')


@pytest.fixture
def config(endpoint):
    return Config('ck', 'cs', callback_url='https://consumer.example/callback',
                  endpoint=endpoint)


@pytest.fixture
def signer(config):
    return Signer(config, clock=lambda: 137131200, noncer=lambda: 'N')
