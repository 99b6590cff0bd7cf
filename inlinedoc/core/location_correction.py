"""
    Translate locations found inside an embedded fragment into the coordinates
    of the document that contains it.
"""
from .source_location import SourceLocation, SourceRange, LocationOffset

def correct_source_location(source_location: SourceLocation|None, location_offset: LocationOffset|None) -> SourceLocation|None:
    """Apply `location_offset` to `source_location`.
    Either argument may be None, in which case `source_location` is returned as-is."""
    if location_offset is None or source_location is None:
        return source_location

    # the offset's column only matters for the fragment's first line.
    # every other line of the fragment already starts at column zero of a real line.
    column = source_location.column + (location_offset.col if source_location.line == 0 else 0)
    file = location_offset.filename if location_offset.filename is not None else source_location.file
    return SourceLocation(line=source_location.line + location_offset.line, column=column, file=file)

def correct_source_range(source_range: SourceRange|None, location_offset: LocationOffset|None) -> SourceRange|None:
    if location_offset is None or source_range is None:
        return source_range
    return SourceRange(
        start=correct_source_location(source_range.start, location_offset),
        end=correct_source_location(source_range.end, location_offset))

def combine_location_offsets(outer: LocationOffset|None, inner: LocationOffset|None) -> LocationOffset|None:
    """Collapse the offsets of a doubly nested fragment into one.

    `inner` positions the innermost fragment within its container, `outer` positions
    that container within the top-level document. The result satisfies:

        correct_source_location(correct_source_location(loc, inner), outer)
            == correct_source_location(loc, combine_location_offsets(outer, inner))
    """
    if outer is None:
        return inner
    if inner is None:
        return outer
    return LocationOffset(
        line=outer.line + inner.line,
        col=inner.col + (outer.col if inner.line == 0 else 0),
        filename=outer.filename if outer.filename is not None else inner.filename)
