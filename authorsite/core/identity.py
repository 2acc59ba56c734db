"""
Caller identity as supplied by the hosting edge.

The identity header is opaque and unauthenticated. It is kept apart from
"no identity at all" until the value is written to the store, where the
anonymous sentinel is used.
"""

from typing import Optional

from flask import g, request

from .config import Config


class RequestIdentity:
    """Who the caller says they are. Never a verified principal."""

    __slots__ = ('principal_id', 'is_login')

    def __init__(self, principal_id: Optional[str] = None, is_login: bool = False):
        self.principal_id = principal_id or None
        self.is_login = is_login

    @property
    def is_anonymous(self) -> bool:
        return self.principal_id is None

    @property
    def storage_value(self) -> str:
        """Value written to the identity column"""
        return self.principal_id if self.principal_id is not None else Config.ANONYMOUS_IDENTITY

    @classmethod
    def from_headers(cls, headers, identity_header=None, login_header=None):
        identity_header = identity_header or Config.IDENTITY_HEADER
        login_header = login_header or Config.LOGIN_HEADER
        return cls(
            principal_id=headers.get(identity_header) or None,
            is_login=headers.get(login_header) == '1',
        )

    def __eq__(self, other):
        if not isinstance(other, RequestIdentity):
            return NotImplemented
        return (self.principal_id, self.is_login) == (other.principal_id, other.is_login)

    def __repr__(self):
        return f"RequestIdentity(principal_id={self.principal_id!r}, is_login={self.is_login!r})"


def load_request_identity(app_config=None):
    """before_request hook body: parse the identity headers onto flask.g"""
    app_config = app_config or {}
    g.identity = RequestIdentity.from_headers(
        request.headers,
        identity_header=app_config.get('IDENTITY_HEADER'),
        login_header=app_config.get('LOGIN_HEADER'),
    )
    return g.identity


def current_identity() -> RequestIdentity:
    """Identity of the request being served (anonymous if none was loaded)"""
    identity = getattr(g, 'identity', None)
    return identity if identity is not None else RequestIdentity()
