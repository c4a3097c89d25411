"""
Response envelope — every successful API payload arrives as {"code": ..., "data": ...}.
"""

from typing import Any
from pydantic import BaseModel


class ResponseEnvelope(BaseModel):
    code: int
    data: Any
