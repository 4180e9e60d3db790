"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, livingthings.toml only
contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorsConfig(BaseModel):
    """[errors] section."""

    model_config = {"frozen": True}

    # Show parser diagnostics to the caller. Only for trusted local use.
    expose_debug: bool = False


class PaginationConfig(BaseModel):
    """[pagination] section."""

    model_config = {"frozen": True}

    page_size: int = Field(default=20, gt=0)
