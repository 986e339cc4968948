# -*- coding: utf-8 -*-

from ..http import HttpMethod, HttpRequest


class HttpRequestor(object):
    """Base class of the API objects: builds and executes requests."""

    def __init__(self, session):
        """
        Args:
            session (Session): session used to execute the requests.
        """
        self._session = session

    @property
    def session(self):
        return self._session

    def get_request(self, url):
        return HttpRequest(url, HttpMethod.GET)

    def post_request(self, url, body):
        return HttpRequest(url, HttpMethod.POST, body)

    def put_request(self, url, body):
        return HttpRequest(url, HttpMethod.PUT, body)

    def delete_request(self, url):
        return HttpRequest(url, HttpMethod.DELETE)

    def execute_request(self, request):
        """Execute the request with the session transport.

        Returns:
            Promise<*>: the decoded response.
        """
        return self._session.transport.exec(request)
