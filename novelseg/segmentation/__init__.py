"""Chapter labeling and document assembly."""

from novelseg.segmentation.assembler import DocumentAssembler, assemble_documents
from novelseg.segmentation.labeler import ChapterLabeler, label_chapters
from novelseg.segmentation.pipeline import DocumentSegmenter, segment_corpus

__all__ = [
    "ChapterLabeler",
    "DocumentAssembler",
    "DocumentSegmenter",
    "assemble_documents",
    "label_chapters",
    "segment_corpus",
]
