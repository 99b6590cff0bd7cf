import pytest

import inlinedoc.core.logger
from inlinedoc.core.markup_tree import MarkupNode

@pytest.fixture(name="log", scope="function")
def fixture_log() -> inlinedoc.core.logger.RootDiagnosticsLogger:
    return inlinedoc.core.logger.create_root_diagnostics_logger()

# parse5-style tree for the following markup:
#
# 1 <html><head>
# 2 <!-- @license MIT -->
# 3 <link rel="import" href="polymer.html">
# 4 <!--
# 5     The fancy element.
# 6     Does a thing.
# 7   -->
# 8 </head><body><dom-module id="fancy-element">
# 9 <script>
# 10   Polymer({is: 'fancy-element'});
# 11 </script>
# 12 <style>p { color: red; }</style>
# 13 </dom-module></body></html>
COMPONENT_DOCUMENT = {
    "nodeName": "#document",
    "childNodes": [{
        "nodeName": "html",
        "__location": {"startTag": {"line": 1, "col": 1, "startOffset": 0, "endOffset": 6}},
        "childNodes": [{
            "nodeName": "head",
            "__location": {"startTag": {"line": 1, "col": 7, "startOffset": 6, "endOffset": 12}},
            "childNodes": [
                {"nodeName": "#text", "data": "\n", "__location": {"line": 1, "col": 13}},
                {"nodeName": "#comment", "data": " @license MIT ", "__location": {"line": 2, "col": 1}},
                {"nodeName": "#text", "data": "\n", "__location": {"line": 2, "col": 22}},
                {"nodeName": "link", "attrs": [{"name": "rel", "value": "import"}, {"name": "href", "value": "polymer.html"}],
                 "__location": {"startTag": {"line": 3, "col": 1, "endOffset": 75}}},
                {"nodeName": "#text", "data": "\n", "__location": {"line": 3, "col": 40}},
                {"nodeName": "#comment", "data": "\n    The fancy element.\n    Does a thing.\n  ", "__location": {"line": 4, "col": 1}},
            ],
        }, {
            "nodeName": "body",
            "childNodes": [{
                "nodeName": "dom-module",
                "attrs": {"id": "fancy-element"},
                "__location": {"startTag": {"line": 8, "col": 14, "endOffset": 170}},
                "childNodes": [
                    {"nodeName": "script",
                     "__location": {"startTag": {"line": 9, "col": 1, "endOffset": 8}, "endTag": {"line": 11, "col": 1, "endOffset": 9}},
                     "childNodes": [
                         {"nodeName": "#text", "data": "\n  Polymer({is: 'fancy-element'});\n", "__location": {"line": 9, "col": 8}},
                     ]},
                    {"nodeName": "style",
                     "__location": {"startTag": {"line": 12, "col": 1, "endOffset": 7}},
                     "childNodes": [
                         {"nodeName": "#text", "data": "p { color: red; }"},
                     ]},
                ],
            }],
        }],
    }],
}

@pytest.fixture(scope="function")
def component_document() -> MarkupNode:
    return MarkupNode.from_mapping(COMPONENT_DOCUMENT)

@pytest.fixture(scope="function")
def node_named(component_document):
    """look up the first node with a given name in the component document, in document order"""
    def find(node_name: str) -> MarkupNode:
        stack = [component_document]
        while stack:
            node = stack.pop()
            if node.node_name == node_name:
                return node
            stack.extend(reversed(node.child_nodes))
        raise LookupError(node_name)
    return find
