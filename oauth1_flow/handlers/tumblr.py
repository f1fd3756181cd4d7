from oauth1_flow.handlers import ConsumerBasedOAuth


class TumblrHandler(ConsumerBasedOAuth):
    AUTHORIZATION_URL = 'https://www.tumblr.com/oauth/authorize'
    REQUEST_TOKEN_URL = 'https://www.tumblr.com/oauth/request_token'
    ACCESS_TOKEN_URL = 'https://www.tumblr.com/oauth/access_token'
    SERVICE = 'tumblr'
