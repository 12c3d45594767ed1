"""Pydantic schemas for serialized JSON:API documents."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class JSONAPIResourceIdentifier(BaseModel):
    """Resource identifier object: type + id."""

    type: str
    id: str


class JSONAPIResource(BaseModel):
    """Resource object with attributes and relationships."""

    type: str
    id: Optional[str] = None
    attributes: Optional[Dict[str, Any]] = None
    relationships: Optional[Dict[str, Any]] = None


class JSONAPIDocument(BaseModel):
    """Top-level JSON:API document."""

    data: Optional[Any] = None
    included: Optional[List[JSONAPIResource]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Dump the document with only the members that were present."""
        return self.model_dump(exclude_unset=True)


class JSONAPIErrorDocument(BaseModel):
    """Top-level JSON:API error document."""

    errors: List[Dict[str, Any]]
