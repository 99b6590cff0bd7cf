"""
    Report what scanners found inside inline documents, in the coordinates of the
    containing document.
"""
import logging
from typing import Any, Iterable

from .inline_document import InlineParsedDocument
from .location_correction import correct_source_range
from .logger import DiagnosticsLogger, ScopedDiagnosticsLogger
from .markup_tree import TreeNode, document_order
from .scanned_document import ScanWarning, Severity

_severity_levels = {
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.INFO: logging.INFO,
}

def translate_warnings(inline_document: InlineParsedDocument) -> list[ScanWarning]:
    """The scanned document's warnings, with ranges corrected into the containing document.
    Empty if the inline document has not been scanned yet."""
    scanned_document = inline_document.scanned_document
    if scanned_document is None:
        return []
    return [
        ScanWarning(
            code=warning.code,
            message=warning.message,
            severity=warning.severity,
            source_range=correct_source_range(warning.source_range, inline_document.location_offset))
        for warning in scanned_document.warnings]

def report_scan_warnings(inline_document: InlineParsedDocument, log: DiagnosticsLogger) -> int:
    """Log each warning found in `inline_document` at its corrected location.
    Returns the number of warnings reported."""
    scoped_log = ScopedDiagnosticsLogger(sink=log, scopes=inline_document.type)
    warnings = translate_warnings(inline_document)
    for warning in warnings:
        extras = (warning.source_range,) if warning.source_range is not None else tuple()
        scoped_log.log_at(_severity_levels[warning.severity], warning.code, warning.message, *extras)
    return len(warnings)

def sort_features_by_document_order(features: Iterable[Any], root: TreeNode) -> list[Any]:
    """Sort features produced by different scanners into the order their nodes appear in `root`.
    Features whose node is not part of `root` sort last, in their original relative order."""
    order = document_order(root)
    unplaced = len(order)
    return sorted(features, key=lambda feature: order.get(id(feature.node), unplaced))
