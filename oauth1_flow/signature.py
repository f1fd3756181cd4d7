import base64
import hashlib
import hmac


class SignatureMethod(object):
    """A way of turning secrets and a base string into a signature.

    Subclasses set ``name`` to the ``oauth_signature_method`` value they
    implement and override ``sign``.
    """
    name = None

    def sign(self, consumer_secret, token_secret, message):
        raise NotImplementedError


class SignatureMethod_HMAC_SHA1(SignatureMethod):
    name = 'HMAC-SHA1'

    def signing_key(self, consumer_secret, token_secret):
        return '&'.join([consumer_secret, token_secret or ''])

    def sign(self, consumer_secret, token_secret, message):
        """Return the base64 encoded HMAC-SHA1 of ``message``."""
        key = self.signing_key(consumer_secret, token_secret)
        mac = hmac.new(key.encode('utf-8'), message.encode('utf-8'),
                       hashlib.sha1)
        return base64.b64encode(mac.digest()).decode('ascii')
