"""Pydantic base model shared by every tactician config."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """Frozen model that rejects unknown keys.

    Typos in YAML files surface as a ValidationError instead of being
    silently dropped, and a loaded config cannot be mutated afterwards.

    Example:
        class DepthConfig(StrictBaseModel):
            search_depth: int

        DepthConfig(search_depth=4)  # OK
        DepthConfig(serach_depth=4)  # ValidationError: extra field 'serach_depth'
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        validate_default=True,
        str_strip_whitespace=True,
    )
