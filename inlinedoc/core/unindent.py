"""
    Documentation comment normalization.
"""
import re

_leading_whitespace_regex = re.compile(r"^\s*")

def unindent(text: str, tab_width: int = 2) -> str:
    """Remove the common leading indentation from every line of `text`.
    Tabs are expanded to `tab_width` spaces first. Blank lines are ignored when
    computing the common indentation."""
    if not text:
        return text
    lines = text.replace("\t", " " * tab_width).split("\n")
    indents = [len(_leading_whitespace_regex.match(line).group(0)) for line in lines if line.strip()]
    if not indents:
        return "\n".join(lines)
    indent = min(indents)
    return "\n".join(line[indent:] for line in lines)
