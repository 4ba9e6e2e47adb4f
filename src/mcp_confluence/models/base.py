"""Base model shared by the Confluence response models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """Base for models built from Confluence REST responses.

    Subclasses implement ``from_api_response`` and are serialized back to the
    wire field names (``_links``) with ``to_simplified_dict``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "ApiModel":
        raise NotImplementedError

    def to_simplified_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
