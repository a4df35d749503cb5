"""Parser configuration."""

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_MAX_COLLECTION_DEPTH


class ParserConfig(BaseModel):
    """Limits and options for decoding an IPP stream."""

    model_config = ConfigDict(frozen=True)

    max_collection_depth: int = Field(
        DEFAULT_MAX_COLLECTION_DEPTH, ge=1, description="Deepest allowed collection nesting"
    )
    capture_payload: bool = Field(True, description="Read document data after the attributes")
