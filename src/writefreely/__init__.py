"""
writefreely — async Python client for the WriteFreely / Write.as API.

Token & username/password authentication, posts, collections and the
authenticated user.
"""

from writefreely.client import Client
from writefreely.auth import Login, Token
from writefreely.handlers import CollectionHandler, PostHandler, UserHandler
from writefreely.errors import (
    WriteFreelyError,
    RequestError,
    AuthenticationError,
    ConnectionError,
    UrlError,
    ParseError,
    LoggedOutError,
    UsageError,
    UnknownError,
)
from writefreely.models.collections import (
    Collection,
    CollectionUpdate,
    CollectionVisibility,
    MoveError,
    MovePost,
    MoveSuccess,
    PinError,
    PinPost,
    PinSuccess,
)
from writefreely.models.posts import Post, PostAppearance, PostCreation, PostUpdate
from writefreely.models.users import User

__version__ = "0.1.0"
__all__ = [
    "Client",
    "Login",
    "Token",
    "CollectionHandler",
    "PostHandler",
    "UserHandler",
    "WriteFreelyError",
    "RequestError",
    "AuthenticationError",
    "ConnectionError",
    "UrlError",
    "ParseError",
    "LoggedOutError",
    "UsageError",
    "UnknownError",
    "Collection",
    "CollectionUpdate",
    "CollectionVisibility",
    "MoveError",
    "MovePost",
    "MoveSuccess",
    "PinError",
    "PinPost",
    "PinSuccess",
    "Post",
    "PostAppearance",
    "PostCreation",
    "PostUpdate",
    "User",
]
