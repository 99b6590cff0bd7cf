"""
    Results produced by the scanning pipeline after it has analyzed a document's contents.

    Scanners are not part of this package; these types are the shape in which they
    hand results back, so that locations can be corrected and reported.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from .source_location import SourceRange

class ScannedFeature(Protocol):
    """Anything discovered by a scanner. The node is required so that features found
    by different scanners can be put back into document order."""
    node: Any
    source_range: SourceRange|None

class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

@dataclass(frozen=True)
class ScanWarning:
    code: str # short kebab-case identifier, used as the log message id
    message: str
    severity: Severity
    source_range: SourceRange|None = None # in the coordinates of the scanned document

@dataclass
class ScannedDocument:
    document_type: str
    url: str|None = None
    features: list[Any] = field(default_factory=list) # ScannedFeature
    warnings: list[ScanWarning] = field(default_factory=list)
