from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Represent a point in a document, e.g. the location of a warning or feature.
    used to give targeted diagnostic output.
    line and column are zero-based, in the coordinate space of whichever
    document (outer or embedded fragment) the location was found in."""
    line: int
    column: int
    file: str|None = None

@dataclass(frozen=True, slots=True)
class SourceRange:
    """Half-open range [start, end) within a single document."""
    start: SourceLocation
    end: SourceLocation

    @property
    def file(self) -> str|None:
        return self.start.file

@dataclass(frozen=True, slots=True)
class LocationOffset:
    """Where an embedded fragment begins within its containing document."""
    line: int # zero-based
    col: int # zero-based, only meaningful for the fragment's first line
    filename: str|None = None # set when the fragment belongs to a differently named source

    def __post_init__(self):
        if self.line < 0 or self.col < 0:
            raise ValueError(f"location offset must be non-negative, got line={self.line}, col={self.col}")
