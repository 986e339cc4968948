# -*- coding: utf-8 -*-

import logging

import requests
from requests import __version__ as requests_version

from .. import __version__ as ibe_version
from ..common import config
from ..common.log import HIDEBUG
from ..promise import Deferred, reject, resolve, wrap_promise
from .errors import HTTPError
from .proxy import prepare_proxy
from .send_request import build_url, send_request

_logger = logging.getLogger(__name__)


class Transport(object):
    """Execute HTTP requests.

    The transport is the only link between the SDK and the network: a
    function from a request to a promise of response.
    """

    def exec(self, request):
        """Execute a request.

        Args:
            request (HttpRequest)
        Returns:
            Promise<*>: the decoded response content. Rejected with a
                `NetworkError` if the request fails.
        """
        raise NotImplementedError()


class RequestsTransport(Transport):
    """Transport executing the requests with the `requests` library.

    Requests are executed synchronously, in the caller's thread: the promise
    returned is always settled. There is no automatic retry.
    """

    def __init__(self, base_url, timeout=None, proxy_settings=None):
        """
        Args:
            base_url (str): URL prepended to relative request URLs. Ex:
                'https://ibe.example.com:443'
            timeout (float, optional): timeout of each request, in seconds.
            proxy_settings (dict, optional): proxy config for `requests`. See
                `prepare_proxy()`.
        """
        self.base_url = base_url
        self.timeout = timeout
        self.proxy_settings = proxy_settings
        self.session = self._prepare_session()

    def _prepare_session(self):
        """Prepare a session to send HTTP(S) requests.

        Returns:
            requests.Session: new HTTP(s) session
        """
        session = requests.Session()
        session.headers.update({
            'User-Agent': 'ibe-sdk/%s python-requests/%s' % (
                ibe_version, requests_version)
        })
        return session

    def exec(self, request):
        _logger.log(HIDEBUG, 'Start request %s', request)
        return self._send(request).fail(
            lambda error: self._log_failure(request, error))

    @wrap_promise
    def _send(self, request):
        return send_request(request, self.session, base_url=self.base_url,
                            timeout=self.timeout,
                            proxy_settings=self.proxy_settings)

    def _log_failure(self, request, error):
        url = build_url(request, self.base_url)
        if isinstance(error, HTTPError) and error.err_message:
            _logger.warning('API call failed to: %s %s. Error: %s',
                            request.method, url, error.err_message)
        else:
            _logger.warning('API call failed to: %s %s (%s)',
                            request.method, url, error)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class RecordingTransport(Transport):
    """Transport who records requests instead of executing them.

    It's useful to test the code building the requests. Each request is
    answered with the next prepared response, or with a Promise resolved with
    None if no response has been prepared.

    Attributes:
        requests (list of HttpRequest): all requests executed, in order.
    """

    def __init__(self):
        self.requests = []
        self._responses = []

    @property
    def last_request(self):
        return self.requests[-1] if self.requests else None

    def respond(self, value):
        """Prepare the response of the next request.

        Args:
            value: result of the request. If it's an Exception, the request
                will be rejected with it.
        """
        if isinstance(value, Exception):
            self._responses.append(reject(value))
        else:
            self._responses.append(resolve(value))

    def respond_later(self):
        """Prepare a response settled manually.

        Returns:
            Deferred: will be used as the response of the next request.
        """
        df = Deferred(_name='RECORDED RESPONSE')
        self._responses.append(df.promise)
        return df

    def exec(self, request):
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return resolve(None)


def create_transport(base_url=None):
    """Create a RequestsTransport configured from the config module.

    Args:
        base_url (str, optional): if not set, the 'api_url' config entry is
            used.
    Returns:
        RequestsTransport
    """
    proxy_mode = config.get('proxy_mode')
    settings = {
        'type': config.get('proxy_type'),
        'url': config.get('proxy_url'),
        'port': config.get('proxy_port'),
        'user': config.get('proxy_user'),
        'password': config.get('proxy_password')
    }
    return RequestsTransport(base_url or config.get('api_url'),
                             timeout=config.get('timeout'),
                             proxy_settings=prepare_proxy(proxy_mode,
                                                          settings))
