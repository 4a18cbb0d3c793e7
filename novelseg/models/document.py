"""Document and corpus data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """The text of one chapter of one book, ready for downstream analysis."""

    model_config = ConfigDict(frozen=True)

    book: str
    chapter: int = Field(ge=0)
    text: str
    line_count: int = Field(default=1, ge=1)

    @property
    def key(self) -> tuple[str, int]:
        return (self.book, self.chapter)


class SegmentedCorpus(BaseModel):
    """Documents in first-appearance order, unique per (book, chapter).

    The corpus is immutable; lookups by key go through ``as_mapping``.
    """

    model_config = ConfigDict(frozen=True)

    documents: list[Document] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.documents)

    def keys(self) -> list[tuple[str, int]]:
        return [doc.key for doc in self.documents]

    def as_mapping(self) -> dict[tuple[str, int], Document]:
        """Return an insertion-ordered mapping from (book, chapter) to Document."""
        return {doc.key: doc for doc in self.documents}

    def get(self, book: str, chapter: int) -> Document | None:
        return self.as_mapping().get((book, chapter))

    def books(self) -> list[str]:
        """Distinct book titles in first-appearance order."""
        seen: dict[str, None] = {}
        for doc in self.documents:
            seen.setdefault(doc.book, None)
        return list(seen)

    def for_book(self, book: str) -> list[Document]:
        return [doc for doc in self.documents if doc.book == book]
