# -*- coding: utf-8 -*-

import logging

from ..common.log import HIDEBUG
from . import errors
from .request import ContentType

_logger = logging.getLogger(__name__)


def build_url(request, base_url=None):
    """Returns the absolute URL of the request.

    Args:
        request (HttpRequest)
        base_url (str, optional): prepended to relative URLs. Ex:
            'https://ibe.example.com:443'
    """
    url = str(request.url)
    if request.url.is_absolute or not base_url:
        return url
    return base_url.rstrip('/') + url


@errors.handler
def send_request(request, session, base_url=None, timeout=None,
                 proxy_settings=None):
    """Performs an HTTP request, then returns the decoded response.

    Args:
        request (HttpRequest)
        session (requests.Session)
        base_url (str, optional): prepended to relative URLs.
        timeout (float, optional): timeout, in seconds.
        proxy_settings (dict, optional): proxy settings to pass to the requests
            library.
    Returns:
        The JSON response decoded, if the request content type is JSON (None
        if the response is empty). The raw content (bytes) if the content type
        is BINARY.
    Raises:
        NetworkError: if the request fails.
    """
    headers = dict(request.headers)
    params = {
        'headers': headers,
        'timeout': timeout,
        'proxies': proxy_settings
    }

    if request.content_type == ContentType.BINARY:
        headers.setdefault('Content-Type', 'application/octet-stream')
        if request.body is not None:
            params['data'] = request.body
    else:
        headers.setdefault('Accept', 'application/json')
        if request.body is not None:
            params['json'] = request.body

    url = build_url(request, base_url)
    response = session.request(method=request.method, url=url, **params)

    _logger.log(HIDEBUG, 'request %s %s -> %s', request.method, url,
                response.status_code)

    response.raise_for_status()

    if request.content_type == ContentType.BINARY:
        return response.content

    if not response.content:
        return None
    return response.json()
