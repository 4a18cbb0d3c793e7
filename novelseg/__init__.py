"""Chapter segmentation and document assembly for novel corpora."""

from novelseg.segmentation import DocumentSegmenter, segment_corpus

__all__ = ["DocumentSegmenter", "segment_corpus"]
