"""Data models for the novel corpus segmenter."""

from novelseg.models.document import Document, SegmentedCorpus
from novelseg.models.line import LabeledLine, Line

__all__ = [
    "Document",
    "LabeledLine",
    "Line",
    "SegmentedCorpus",
]
