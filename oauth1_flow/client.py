import logging

import httplib2

from oauth1_flow.request import Request

logger = logging.getLogger(__name__)


class Client(httplib2.Http):
    """An httplib2 client which signs every request via OAuth1."""

    def __init__(self, config, token, signer=None, cache=None, timeout=None,
                 proxy_info=httplib2.proxy_info_from_environment, **kwargs):
        self.config = config
        self.token = token
        self.signer = signer or config.signer()
        httplib2.Http.__init__(self, cache=cache, timeout=timeout,
                               proxy_info=proxy_info, **kwargs)

    def request(self, uri, method="GET", body=None, headers=None,
                redirections=httplib2.DEFAULT_MAX_REDIRECTS,
                connection_type=None):
        req = Request(method, uri, headers=headers, body=body)
        self.signer.set_request_auth_header(req, self.token)
        body = req.body
        if hasattr(body, 'read'):
            body = body.read()
        logger.debug('signed %s %s', method, uri)
        return httplib2.Http.request(self, uri, method=method, body=body,
                                     headers=req.headers,
                                     redirections=redirections,
                                     connection_type=connection_type)
