"""Book schemas."""

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """A book in the catalog.

    Every field has a default so that a missing title or author is reported
    by the catalog service rather than rejected during parsing.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default="", description="Identifier assigned by the store")
    title: str = Field(default="", description="Book title")
    author: str = Field(default="", description="Book author")
    published_year: int = Field(default=0, alias="publishedYear", description="Year of publication")
    isbn: str = Field(default="", description="ISBN")
    description: str = Field(default="", description="Free-form description")


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""
    error: str


class MessageResponse(BaseModel):
    """Plain confirmation message."""
    message: str
