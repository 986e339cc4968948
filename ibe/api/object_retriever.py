# -*- coding: utf-8 -*-

import logging

from .. import promise
from ..http import Uri
from .requestor import HttpRequestor

_logger = logging.getLogger(__name__)


class ObjectRetriever(HttpRequestor):
    """CRUD operations on one type of IBE object.

    The object type is the part of the URL after '/api/': a collection name
    like 'Dashboards', or a sub-collection like 'Dashboards/12/Components'.
    All requests are authenticated with the token of the session.

    Examples:

        >>> dashboards = ObjectRetriever(session, 'Dashboards')
        >>> dashboards.find(12).done(print)
        >>> dashboards.add({'Name': 'Sales'}, 12, 'Copy')  # POST /api/Dashboards/12/Copy
        >>> queries = ObjectRetriever(session, 'DataCaches/1590/Queries')
        >>> queries.find(1210, 'Exec', {'state': 'Alabama'})
    """

    def __init__(self, session, object_type):
        """
        Args:
            session (Session)
            object_type (str): ex: 'Folders', 'Reports/3/Tabs'.
        """
        super(ObjectRetriever, self).__init__(session)
        self.object_type = object_type

    def __repr__(self):
        return '<ObjectRetriever %s>' % self.object_type

    def add_auth_header(self, request):
        return request.add_header('X-IBE-Token', self._session.token)

    def _collection_uri(self):
        # A sub-collection URL has no trailing slash.
        if '/' in self.object_type:
            return Uri('/api/%s' % self.object_type)
        return Uri('/api/%s/' % self.object_type)

    def _object_uri(self, *segments):
        path = '/'.join(['/api', self.object_type] +
                        [str(s) for s in segments])
        return Uri(path)

    def _send(self, request):
        self.add_auth_header(request)
        return self.execute_request(request)

    def find_all(self):
        """List all objects of the collection.

        Returns:
            Promise<list>
        """
        return self._send(self.get_request(self._collection_uri()))

    def find(self, obj_id, action=None, query=None):
        """Get an object, or the result of an action on this object.

        Args:
            obj_id: object ID.
            action (str, optional): action path, appended after the ID. Ex:
                'Export', 'Meta', 'Exec'.
            query (dict, optional): query parameters.
        Returns:
            Promise<*>
        """
        if action:
            url = self._object_uri(obj_id, action)
        else:
            url = self._object_uri(obj_id)
        if query:
            url.query.update(query)
        return self._send(self.get_request(url))

    def add(self, obj, obj_id=None, action=None):
        """Create an object, or post data to an action.

        The URL depends of the arguments given:
        - action and obj_id: /api/{type}/{obj_id}/{action}
        - action only: /api/{type}/{action}
        - obj_id only: /api/{type}/{obj_id}
        - none: the collection URL.

        Args:
            obj: request body.
            obj_id (optional)
            action (str, optional)
        Returns:
            Promise<*>: usually, the object created.
        """
        if action and obj_id:
            url = self._object_uri(obj_id, action)
        elif action:
            url = self._object_uri(action)
        elif obj_id:
            url = self._object_uri(obj_id)
        else:
            url = self._collection_uri()
        return self._send(self.post_request(url, obj))

    def update(self, obj_id, obj, action=None):
        """Replace an object, or put data to one of its actions.

        Returns:
            Promise<*>
        """
        if action:
            url = self._object_uri(obj_id, action)
        else:
            url = self._object_uri(obj_id)
        return self._send(self.put_request(url, obj))

    def remove(self, obj_id):
        """Delete an object.

        Returns:
            Promise<*>
        """
        return self._send(self.delete_request(self._object_uri(obj_id)))

    def find_many(self, obj_ids):
        """Get several objects at once.

        All requests are sent without waiting for the others.

        Args:
            obj_ids (list)
        Returns:
            Promise<list>: objects, in the order of `obj_ids`. Rejected with
                an AggregateError if at least one request fails.
        """
        return promise.when(*[self.find(obj_id) for obj_id in obj_ids])

    def find_sequence(self, obj_ids):
        """Get several objects, one after the other.

        A request is sent only when the previous one has succeeded.

        Args:
            obj_ids (list)
        Returns:
            Promise<list>: objects, in the order of `obj_ids`. Rejected with
                the error of the first failed request.
        """
        obj_ids = list(obj_ids)

        def unspool(index):
            if index >= len(obj_ids):
                return None
            next_index = index + 1 if index + 1 < len(obj_ids) else None
            return promise.Step(self.find(obj_ids[index]), next_index)

        return promise.unfold(unspool, 0)

    def objects(self, obj_ids):
        """Iterate over several objects, fetched on demand.

        Example:

            >>> promise.each(retriever.objects([1, 2, 3]), print)

        Args:
            obj_ids (list)
        Returns:
            callable: generator factory, to use with `promise.each()`. Each
                iterator created requests the objects from the first one.
        """
        obj_ids = list(obj_ids)

        def factory():
            remaining = list(obj_ids)

            def step():
                if not remaining:
                    return promise.resolve(promise.END)
                return self.find(remaining.pop(0))

            return step

        return promise.generator(factory)
