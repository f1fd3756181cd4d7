from oauth1_flow.config import Config, Endpoint, Token
from oauth1_flow.client import Client
from oauth1_flow.encoding import percent_encode
from oauth1_flow.exceptions import (CallbackError, ImproperlyConfigured,
                                    InvalidResponse, MalformedRequest,
                                    NotAuthorized, ServiceFail)
from oauth1_flow.request import Request
from oauth1_flow.signature import SignatureMethod, SignatureMethod_HMAC_SHA1
from oauth1_flow.signer import Signer

__version__ = '2.0.0'
