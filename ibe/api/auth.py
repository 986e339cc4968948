# -*- coding: utf-8 -*-

import base64
import logging

from .. import promise
from ..http import Uri
from ..http.errors import NetworkError
from .requestor import HttpRequestor

_logger = logging.getLogger(__name__)

AUTH_PATH = '/api/auth'


class InvalidDataError(NetworkError):
    def __init__(self, data):
        message = "The authentication server has returned invalid data."
        super(InvalidDataError, self).__init__(None, message=message)
        self.data = data


class Auth(HttpRequestor):
    """Open and close an authenticated session on the IBE server."""

    @property
    def auth_token(self):
        return self._session.token

    @promise.reduce_coroutine()
    def login(self, username, password):
        """Authenticate with a couple username and password.

        On success, the token received is stored in the session, and used by
        all subsequent requests.

        Args:
            username (str)
            password (str)
        Returns:
            Promise<dict>: the server response, containing the 'Token'.
        """
        credentials = ('%s:%s' % (username, password)).encode('utf-8')
        auth_string = base64.b64encode(credentials).decode('ascii')

        request = self.post_request(Uri(AUTH_PATH), None)
        request.add_header('X-IBE-Auth', auth_string)

        response = yield self.execute_request(request)

        try:
            token = response['Token']
        except (KeyError, TypeError):
            raise InvalidDataError(response)
        self._session.update(token)
        _logger.info('Logged in as %s', username)

        yield response

    @promise.reduce_coroutine()
    def logoff(self):
        """Revoke the session token.

        The token is removed from the session once the server has accepted
        the request.

        Returns:
            Promise<*>: the server response.
        """
        request = self.delete_request(Uri(AUTH_PATH))
        request.add_header('X-IBE-Token', self._session.token)

        response = yield self.execute_request(request)
        self._session.update(None)
        _logger.info('Logged off')

        yield response
