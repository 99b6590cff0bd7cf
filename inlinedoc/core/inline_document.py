"""
    Inline documents: fragments of another language embedded in a markup document,
    usually a <script> or <style> element.

    Anything found while scanning an inline document's contents is located relative to
    the fragment. The fragment's LocationOffset maps those locations back into the
    containing document, see location_correction.correct_source_location.
"""
from dataclasses import FrozenInstanceError, dataclass, field
from typing import Generic, TypeVar

from .configuration import CommentFilter, InlineDocumentConfiguration, is_license_comment
from .logger import DiagnosticsLogger
from .markup_tree import ElementLocation, PlainLocation, TreeNode, is_comment_node, is_text_node, iter_preceding_nodes
from .scanned_document import ScannedDocument
from .source_location import LocationOffset, SourceLocation, SourceRange
from .unindent import unindent

N = TypeVar("N")

class LocationExtractionError(ValueError):
    """A node that should carry location metadata does not."""
    def __init__(self, node):
        super().__init__(f"couldn't extract a location offset from node: {node!r}")
        self.node = node

@dataclass
class InlineParsedDocument(Generic[N]):
    """An inline document, e.g. the contents of a <script> or <style> element.
    N is the type of the tree node the document was found at."""
    type: str # "javascript", "css", "html", ... not a closed set
    contents: str # verbatim, not de-indented
    node: N
        # ^^^ required for ordering features produced by different scanners, not otherwise inspected
    location_offset: LocationOffset # of this document within the containing document
    attached_comment: str|None = None
    source_range: SourceRange|None = None # of the originating node, when the finder knows it
    _scanned_document: ScannedDocument|None = field(default=None, init=False, repr=False)

    @property
    def scanned_document(self) -> ScannedDocument|None:
        """None until the scanning pipeline has analyzed `contents`."""
        return self._scanned_document

    @scanned_document.setter
    def scanned_document(self, scanned_document: ScannedDocument):
        if self._scanned_document is not None:
            raise ValueError(f"inline {self.type} document has already been scanned")
        object.__setattr__(self, "_scanned_document", scanned_document)

    def __setattr__(self, name, value):
        # everything except the scanned document is fixed once __init__ has assigned it
        if name in self.__dataclass_fields__ and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field '{name}'")
        super().__setattr__(name, value)

def get_attached_comment_text(node: TreeNode, is_excluded_comment: CommentFilter = is_license_comment, tab_width: int = 2) -> str|None:
    """Return the text of the comment nearest before `node`, de-indented and trimmed,
    or None if there is no such comment or it is excluded (by default: license banners)."""
    # When an element is defined in a fragment structured as
    # imports -> comment describing the element -> the element itself,
    # the parser attaches the comment to <head> rather than making it a sibling of the element.
    # So the search walks all the way up and back, not just across siblings.
    comment_node = next((n for n in iter_preceding_nodes(node) if is_comment_node(n)), None)
    comment = comment_node.data if comment_node is not None else None
    if not comment or is_excluded_comment(comment):
        return None
    return unindent(comment, tab_width=tab_width).strip()

def get_location_offset_of_start_of_text_content(node: TreeNode) -> LocationOffset:
    """Return the offset at which the text content of `node` begins.
    Raises LocationExtractionError if neither the node nor its children carry a location."""
    first_child_with_location = next((child for child in node.child_nodes if child.location is not None), None)
    best_location = first_child_with_location.location if first_child_with_location is not None else node.location
    if best_location is None:
        raise LocationExtractionError(node)

    if isinstance(best_location, PlainLocation):
        return LocationOffset(line=best_location.line - 1, col=best_location.col)
    if not isinstance(best_location, ElementLocation):
        raise TypeError(f"unsupported location metadata {best_location!r}, resolve it with parse_location_info first")
    # text begins right after the opening tag
    return LocationOffset(line=best_location.start_tag.line - 1, col=best_location.start_tag.end_offset)

def get_text_content(node: TreeNode) -> str:
    """Concatenated text of the node's direct text children, verbatim."""
    return "".join(child.data or "" for child in node.child_nodes if is_text_node(child))

def inline_document_from_node(node: N, document_type: str, config: InlineDocumentConfiguration|None = None, log: DiagnosticsLogger|None = None) -> InlineParsedDocument[N]:
    """Build an InlineParsedDocument for a node the caller has identified as containing one."""
    config = config or InlineDocumentConfiguration()
    location_offset = get_location_offset_of_start_of_text_content(node)
    attached_comment = get_attached_comment_text(node, is_excluded_comment=config.comment_filter(), tab_width=config.unindent_tab_width)
    result = InlineParsedDocument(
        type=document_type,
        contents=get_text_content(node),
        node=node,
        location_offset=location_offset,
        attached_comment=attached_comment)
    if log is not None:
        start = SourceLocation(line=location_offset.line, column=location_offset.col, file=location_offset.filename)
        log.detail("found-inline-document", f"found inline {document_type} document <{node.node_name}>", start)
    return result
