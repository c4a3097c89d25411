"""
Client binding shared by resource handles and request drafts.
"""

from typing import Any

from pydantic import BaseModel, PrivateAttr

from writefreely.errors import UsageError


class ClientBound(BaseModel):
    """A model that may carry the Client that fetched or created it.

    The client is attached once, right after validation, and never replaced.
    """

    _client: Any = PrivateAttr(default=None)

    @property
    def client(self) -> Any:
        return self._client

    def _with_client(self, client: Any) -> "ClientBound":
        if self._client is not None and self._client is not client:
            raise UsageError(f"{type(self).__name__} is already bound to a client")
        self._client = client
        return self

    def _require_client(self) -> Any:
        if self._client is None:
            raise UsageError(f"{type(self).__name__} has no client attached")
        return self._client
