from typing import Any

import pydantic

DEFAULT_MARKER = "$"

# Characters that path normalization treats as separators
SEPARATORS = frozenset({"/", "\\"})


class SegmentationConfig(pydantic.BaseModel):
    """How path strings are split into trie segments."""

    model_config = pydantic.ConfigDict(frozen=True, extra="forbid")

    marker: str = DEFAULT_MARKER

    @pydantic.field_validator("marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """Ensure marker is a single character that is not a separator."""
        if len(v) != 1:
            raise ValueError("marker must be exactly one character")
        if v in SEPARATORS:
            raise ValueError("marker cannot be a path separator")
        return v


def build_config(**values: Any) -> SegmentationConfig:
    """Validate raw config values into a SegmentationConfig."""
    from pathtrie import exceptions

    try:
        return SegmentationConfig(**values)
    except pydantic.ValidationError as e:
        msg = "; ".join(err["msg"] for err in e.errors())
        raise exceptions.ConfigValidationError(f"Invalid segmentation config: {msg}") from None
