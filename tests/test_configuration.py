import pydantic
import pytest

from inlinedoc.core.configuration import (
    InlineDocumentConfiguration, is_license_comment, license_comment_filter, load_configuration)
from inlinedoc.core.source_location import SourceLocation

def test_default_configuration():
    config = InlineDocumentConfiguration()
    assert config.license_markers == ["@license"]
    assert config.unindent_tab_width == 2
    assert config.comment_filter() is is_license_comment

def test_is_license_comment():
    assert is_license_comment("\n @license\n Copyright (c) 2016\n")
    assert not is_license_comment("The fancy element.")

def test_license_comment_filter_matches_any_marker():
    is_excluded = license_comment_filter(["@license", "@preserve"])
    assert is_excluded("@preserve keep me in minified output")
    assert is_excluded("@license MIT")
    assert not is_excluded("Does a thing")
    assert not license_comment_filter([])("@license MIT")

def test_custom_markers_build_custom_filter():
    is_excluded = InlineDocumentConfiguration(license_markers=["SPDX-License-Identifier"]).comment_filter()
    assert is_excluded("SPDX-License-Identifier: BSD-3-Clause")
    assert not is_excluded("@license MIT")

def test_assignment_is_validated():
    config = InlineDocumentConfiguration()
    with pytest.raises(pydantic.ValidationError):
        config.unindent_tab_width = -1

def test_load_configuration(caplog, log):
    config = load_configuration({"license_markers": ["@license", "@preserve"], "unindent_tab_width": 4}, log)
    assert config.license_markers == ["@license", "@preserve"]
    assert config.unindent_tab_width == 4
    assert log.error_count() == 0
    assert [r.message_id for r in caplog.records] == ["set-field", "set-field"]

def test_load_configuration_reports_and_skips_bad_entries(caplog, log):
    source_loc = SourceLocation(line=2, column=0, file="inlinedoc.json")
    config = load_configuration({"unindent_tab_width": "lots", "no_such_field": True, "license_markers": ["@copyright"]}, log, source_loc)
    assert config.unindent_tab_width == 2
    assert config.license_markers == ["@copyright"]
    assert log.error_count() == 2
    errors = [r for r in caplog.records if r.levelname == "ERROR"]
    assert [r.message_id for r in errors] == ["invalid-field-assignment", "unknown-field"]
    assert all(r.source_file == "inlinedoc.json" and r.source_line == 3 for r in errors)

def test_load_configuration_accepts_values_that_are_not_json(caplog, log):
    config = load_configuration({"license_markers": {"@preserve"}}, log)
    assert config.license_markers == ["@preserve"]
    assert log.error_count() == 0
    assert "@preserve" in caplog.records[0].msg

def test_load_configuration_reports_invalid_values_that_are_not_json(caplog, log):
    config = load_configuration({"unindent_tab_width": object()}, log)
    assert config.unindent_tab_width == 2
    assert log.error_count() == 1
    assert caplog.records[-1].message_id == "invalid-field-assignment"
