"""Lens document models — the trusted shape served to clients."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class LensContent(BaseModel):
    """One embedded content item. `data` is an opaque payload (usually base64)."""

    model_config = ConfigDict(extra="allow")

    data: str


class LensDocument(BaseModel):
    """A lens that passed profile validation.

    Unknown fields are kept so the document round-trips to clients unchanged.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    resource_type: Literal["Library"] = Field(alias="resourceType")
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    status: Optional[Literal["draft", "active", "retired", "unknown"]] = None
    type: Any
    content: list[LensContent] = Field(min_length=1)
    extension: Optional[list[Any]] = None

    def to_json(self) -> dict[str, Any]:
        """Serialize back to the on-disk field names, omitting fields the file never had."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
