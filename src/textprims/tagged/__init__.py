"""
Tagged strings subpackage - phantom-tagged strings and string-literal conversion.
"""

from textprims.tagged.tags import (
    TaggedString,
    tag,
    run_tag,
    append,
    mconcat,
)

from textprims.tagged.is_string import (
    IsString,
    from_string,
    register_is_string,
)

__all__ = [
    # tags
    "TaggedString",
    "tag",
    "run_tag",
    "append",
    "mconcat",
    # is_string
    "IsString",
    "from_string",
    "register_is_string",
]
