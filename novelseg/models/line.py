"""Line data models."""

from pydantic import BaseModel, ConfigDict, Field


class Line(BaseModel):
    """One line of raw text belonging to a book."""

    model_config = ConfigDict(frozen=True)

    book: str
    text: str
    position: int = Field(default=0, ge=0)  # Index of the line within its book


class LabeledLine(Line):
    """A line tagged with the chapter it falls in.

    Chapter 0 holds front matter: everything before the first heading.
    """

    chapter: int = Field(default=0, ge=0)
