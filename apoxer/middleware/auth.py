"""
Authentication Middleware - per-request identity and the login decorators

Routes never read Flask-Login directly. They ask ``current_identity()``,
which goes through the ``IdentityResolver`` registered on the app once per
request and caches the answer on ``flask.g``. Tests swap the resolver to act
as any user without logging in.
"""
from dataclasses import dataclass
from functools import wraps
from typing import Optional

from flask import current_app, g
from flask_login import current_user

from apoxer.exceptions import AuthenticationException

EXTENSION_KEY = 'identity_resolver'


@dataclass(frozen=True)
class Identity:
    user_id: str
    email: str
    username: Optional[str] = None
    display_name: Optional[str] = None


class IdentityResolver:
    """Resolves the signed-in Flask-Login user into an ``Identity``"""

    def resolve(self) -> Optional[Identity]:
        if not current_user.is_authenticated:
            return None
        return Identity(
            user_id=current_user.id,
            email=current_user.email,
            username=current_user.username,
            display_name=current_user.display_name,
        )


class StaticIdentityResolver(IdentityResolver):
    """Always resolves to the same identity (or to nobody)"""

    def __init__(self, identity: Optional[Identity] = None):
        self.identity = identity

    def resolve(self) -> Optional[Identity]:
        return self.identity


def init_identity(app, resolver: Optional[IdentityResolver] = None):
    app.extensions[EXTENSION_KEY] = resolver or IdentityResolver()


def current_identity() -> Optional[Identity]:
    if '_identity' not in g:
        g._identity = current_app.extensions[EXTENSION_KEY].resolve()
    return g._identity


def identity_required(f):
    """Pages: send anonymous visitors to the login page, keeping ``next``"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if current_identity() is None:
            from apoxer.auth import login_manager
            return login_manager.unauthorized()
        return f(*args, **kwargs)
    return decorated_function


def api_identity_required(f):
    """JSON endpoints: 401 for anonymous callers"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if current_identity() is None:
            raise AuthenticationException()
        return f(*args, **kwargs)
    return decorated_function
