"""
    Configuration parameters for inline document extraction, stored in a pydantic model.
"""
from typing import Any, Callable, Mapping
import json

from pydantic import BaseModel, Field, ConfigDict, ValidationError

from .logger import DiagnosticsLogger
from .source_location import SourceLocation

CommentFilter = Callable[[str], bool]
    # ^^^ returns True for comment text that must never be attached as documentation

def is_license_comment(comment_text: str) -> bool:
    return "@license" in comment_text

def license_comment_filter(markers: list[str]) -> CommentFilter:
    """Build a comment filter that excludes comments containing any of `markers`."""
    markers = list(markers)
    def is_excluded(comment_text: str) -> bool:
        return any(marker in comment_text for marker in markers)
    return is_excluded

class InlineDocumentConfiguration(BaseModel):
    """Configuration that applies to inline document extraction"""
    model_config = ConfigDict(
        validate_assignment=True)

    license_markers: list[str] = Field(default_factory=lambda: ["@license"], description="Comments containing any of these markers are license banners and are never attached as documentation.")
    unindent_tab_width: int = Field(default=2, ge=0, description="Number of spaces a tab counts as when de-indenting attached comments.")

    def comment_filter(self) -> CommentFilter:
        if self.license_markers == ["@license"]:
            return is_license_comment
        return license_comment_filter(self.license_markers)

def load_configuration(values: Mapping[str, Any], log: DiagnosticsLogger, source_loc: SourceLocation|None = None) -> InlineDocumentConfiguration:
    """Construct a configuration from `values`, assigning one field at a time.
    Unknown or invalid entries are reported and skipped, leaving the default in place."""
    extras = (source_loc,) if source_loc is not None else tuple()
    result = InlineDocumentConfiguration()
    for field_name, value in values.items():
        if field_name not in InlineDocumentConfiguration.model_fields:
            log.error("unknown-field", f"didn't assign configuration field. unknown configuration field '{field_name}'", *extras)
            continue
        try:
            log.detail("set-field", f"setting configuration field: {field_name} = {json.dumps(value, default=repr)}", *extras)
            setattr(result, field_name, value) # uses pydantic for coercion and validation, may raise exception
        except ValidationError as validation_error:
            log.error("invalid-field-assignment", f"could not assign configuration value '{json.dumps(value, default=repr)}' to field '{field_name}': {str(validation_error)}", *extras)
    return result
