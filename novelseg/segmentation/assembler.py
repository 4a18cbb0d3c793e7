"""Document assembly: join labeled lines into one document per chapter."""

import logging
from collections.abc import Iterable

from novelseg.errors import InvalidInputError
from novelseg.models.document import Document, SegmentedCorpus
from novelseg.models.line import LabeledLine

logger = logging.getLogger(__name__)


class DocumentAssembler:
    """Groups labeled lines by (book, chapter) and joins their text.

    Groups keep the order in which their keys are first seen; lines within
    a group keep their input order. Empty lines are joined like any other,
    so they show up as doubled separators in the document text.

    Args:
        separator: String placed between consecutive lines of a document.
    """

    def __init__(self, separator: str = " ") -> None:
        self._separator = separator

    def assemble(self, labeled_lines: Iterable[LabeledLine]) -> SegmentedCorpus:
        """Build the document corpus from labeled lines.

        Args:
            labeled_lines: Output of ChapterLabeler.label, or any labeled
                           lines in reading order.

        Returns:
            A SegmentedCorpus with one Document per distinct (book, chapter).

        Raises:
            InvalidInputError: If an item is not a LabeledLine or has no book.
        """
        groups: dict[tuple[str, int], list[str]] = {}

        for index, line in enumerate(labeled_lines):
            if not isinstance(line, LabeledLine):
                raise InvalidInputError(
                    f"Line {index}: expected a LabeledLine, got {type(line).__name__}"
                )
            if not line.book.strip():
                raise InvalidInputError(f"Line {index}: missing book for text {line.text!r}")
            groups.setdefault((line.book, line.chapter), []).append(line.text)

        documents = [
            Document(
                book=book,
                chapter=chapter,
                text=self._separator.join(texts),
                line_count=len(texts),
            )
            for (book, chapter), texts in groups.items()
        ]

        logger.debug("Assembled %d documents", len(documents))
        return SegmentedCorpus(documents=documents)


def assemble_documents(
    labeled_lines: Iterable[LabeledLine], separator: str = " "
) -> SegmentedCorpus:
    """Assemble documents using a one-off DocumentAssembler."""
    return DocumentAssembler(separator).assemble(labeled_lines)
