"""End-to-end segmentation: raw lines in, chapter documents out."""

import logging
from collections.abc import Iterable

from novelseg.config import SegmentationConfig
from novelseg.models.document import SegmentedCorpus
from novelseg.segmentation.assembler import DocumentAssembler
from novelseg.segmentation.labeler import ChapterLabeler, RawLine

logger = logging.getLogger(__name__)


class DocumentSegmenter:
    """Runs the chapter labeler and the document assembler in sequence.

    Holds no state between calls; each ``segment`` call works on its own
    input and returns a new corpus.
    """

    def __init__(self, config: SegmentationConfig | None = None) -> None:
        self._config = config or SegmentationConfig()
        self._labeler = ChapterLabeler(self._config)
        self._assembler = DocumentAssembler(self._config.separator)

    def segment(self, lines: Iterable[RawLine]) -> SegmentedCorpus:
        labeled = self._labeler.label(lines)
        corpus = self._assembler.assemble(labeled)
        logger.info(
            "Segmented %d lines into %d documents across %d books",
            len(labeled),
            len(corpus),
            len(corpus.books()),
        )
        return corpus


def segment_corpus(
    lines: Iterable[RawLine], config: SegmentationConfig | None = None
) -> SegmentedCorpus:
    """Segment lines into chapter documents.

    Args:
        lines: ``Line`` objects or ``(book, text)`` pairs in reading order.
        config: Optional heading pattern and separator settings.

    Returns:
        The SegmentedCorpus. Empty input gives an empty corpus.
    """
    return DocumentSegmenter(config).segment(lines)
