# -*- coding: utf-8 -*-

import pytest

from ibe.http import ContentType, HttpMethod, HttpRequest, QueryParameters, \
    Uri


class TestQueryParameters(object):

    def test_empty_query(self):
        assert str(QueryParameters()) == ''

    def test_query_keeps_order(self):
        params = QueryParameters()
        params.add('b', 2).add('a', 1)
        assert str(params) == '?b=2&a=1'

    def test_query_encoding(self):
        params = QueryParameters().add('state', 'New York').add('q', 'a&b')
        assert str(params) == '?state=New+York&q=a%26b'

    def test_replace_parameter(self):
        params = QueryParameters().add('a', 1).add('a', 2)
        assert str(params) == '?a=2'


class TestUri(object):

    def test_relative_uri(self):
        uri = Uri('/api/Folders/')
        assert not uri.is_absolute
        assert str(uri) == '/api/Folders/'

    def test_path_without_leading_slash(self):
        assert str(Uri('api/Folders')) == '/api/Folders'

    def test_empty_uri(self):
        assert str(Uri()) == ''

    def test_absolute_uri(self):
        uri = Uri('/api/auth')
        uri.host = 'ibe.example.com'
        uri.port = 8443
        uri.is_https = True
        assert uri.is_absolute
        assert str(uri) == 'https://ibe.example.com:8443/api/auth'

    def test_http_scheme(self):
        uri = Uri('/x')
        uri.host = 'localhost'
        uri.port = 80
        assert str(uri) == 'http://localhost:80/x'

    def test_host_without_port(self):
        uri = Uri('/x')
        uri.host = 'localhost'
        with pytest.raises(ValueError):
            str(uri)

    def test_port_without_host(self):
        uri = Uri('/x')
        uri.port = 80
        with pytest.raises(ValueError):
            str(uri)

    def test_uri_with_query(self):
        uri = Uri('/api/DataCaches/3/Queries/12/Exec')
        uri.query.add('state', 'Alabama')
        assert str(uri) == '/api/DataCaches/3/Queries/12/Exec?state=Alabama'

    def test_path_segments_are_quoted(self):
        uri = Uri('/api/Folders')
        uri.path.append('My Folder')
        assert str(uri) == '/api/Folders/My%20Folder'

    def test_repr(self):
        assert repr(Uri('/a')) == "Uri('/a')"


class TestHttpRequest(object):

    def test_default_request(self):
        request = HttpRequest(Uri('/api/Folders/'))
        assert request.method == HttpMethod.GET
        assert request.content_type == ContentType.JSON
        assert request.body is None
        assert request.headers == []

    def test_headers(self):
        request = HttpRequest(Uri('/'), HttpMethod.POST, {'a': 1})
        assert request.add_header('X-IBE-Token', 'T1') is request
        request.add_header('Accept', 'text/plain')

        assert request.get_header('x-ibe-token') == 'T1'
        assert request.get_header('Missing') is None
        assert [h.key for h in request.headers] == ['X-IBE-Token', 'Accept']

    def test_last_header_wins(self):
        request = HttpRequest(Uri('/'))
        request.add_header('X', '1').add_header('X', '2')
        assert request.get_header('X') == '2'

    def test_str(self):
        request = HttpRequest(Uri('/api/x'), HttpMethod.DELETE)
        assert str(request) == 'DELETE (JSON) /api/x'
