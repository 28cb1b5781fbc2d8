from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthToken(BaseModel):
    """OAuth-style token returned by a client-credentials exchange.

    Only ``access_token`` and ``token_type`` are required. Optional fields the
    server leaves out decode to ``None``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    access_token: str
    token_type: str
    expires_in: Optional[int] = Field(default=None, strict=True)
    refresh_token: Optional[str] = None
    scope: Optional[str] = None
