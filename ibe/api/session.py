# -*- coding: utf-8 -*-

import logging

from ..common import config, log
from ..http import create_transport

_logger = logging.getLogger(__name__)


class Session(object):
    """Connection context shared by all the API objects.

    A session holds the transport used to execute the requests and the
    authentication token obtained by `Auth.login()`. Each API object
    receives the session explicitly: several sessions (on different servers,
    or with different users) can be used at the same time.

    Attributes:
        token (str): authentication token. None if not logged.
        transport (Transport): transport executing the requests.
        token_changed_callback (callable): A callback that can be assigned to
            be informed of token changes. It receives the session.
    """

    def __init__(self, base_url=None, token=None, transport=None):
        """
        Args:
            base_url (str, optional): IBE server address. Ignored if a
                transport is given. Default to the 'api_url' config entry.
            token (str, optional): token of a previous authentication.
            transport (Transport, optional): if not set, a RequestsTransport
                is created from the config.
        """
        self.token = token
        self.transport = transport or create_transport(base_url)
        self.token_changed_callback = None

    @classmethod
    def from_config(cls, config_file_path=None):
        """Load the config file, then create a session from it.

        The log levels of the config (`debug_mode` and `log_levels`) are
        applied to the SDK loggers. Handlers and the root logger are left to
        the application (see `ibe.common.log`).

        Args:
            config_file_path (str, optional): default to 'ibe.ini' in the
                user config directory.
        Returns:
            Session: not authenticated.
        """
        config.load(config_file_path)
        levels = {'ibe': 'DEBUG' if config.get('debug_mode') else 'INFO'}
        levels.update(config.get('log_levels'))
        log.set_logs_level(levels)
        return cls()

    @property
    def is_authenticated(self):
        return self.token is not None

    def update(self, token):
        """Replace the authentication token.

        Args:
            token (str): new token; None to forget the current one.
        """
        self.token = token
        _logger.debug('Session token %s', 'set' if token else 'cleared')
        self._notify_token_changed()

    def _notify_token_changed(self):
        if self.token_changed_callback:
            self.token_changed_callback(self)

    def close(self):
        """Release the transport resources, if any."""
        close = getattr(self.transport, 'close', None)
        if close:
            close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
