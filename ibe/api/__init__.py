# -*- coding: utf-8 -*-
"""API module

High-level access to the IBE server REST API. All objects share a `Session`,
which holds the transport and the authentication token.

Examples:

    >>> with Session('https://ibe.example.com:443') as session:
    ...     Auth(session).login('admin', 'secret').safeguard()
    ...     folders = ObjectRetriever(session, 'Folders')
    ...     folders.find_all().done(print)
"""

from ..http import QueryParameters
from .auth import Auth, InvalidDataError
from .object_retriever import ObjectRetriever
from .requestor import HttpRequestor
from .session import Session

__all__ = ['Auth', 'HttpRequestor', 'InvalidDataError', 'ObjectRetriever',
           'QueryParameters', 'Session']
