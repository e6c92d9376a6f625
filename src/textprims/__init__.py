"""
textprims - Small, pure text-manipulation primitives.

This package is organized into focused subpackages:

- tagged/       Phantom-tagged strings and string-literal conversion
                - tags: TaggedString, tag, run_tag, append, mconcat
                - is_string: IsString, from_string, register_is_string

- construct/    Strings from characters
                - chars: from_chars, cons, snoc, char_range

- access/       Total accessors (None instead of exceptions)
                - safe: head, last, tail, init, index

- text/         Pure string transforms
                - splitting: lines, unlines, words, unwords
                - substitution: substitute, substitute_many
                - casing: capitalize, cap_words
                - padding: rightpad, leftpad, rightpad_by, leftpad_by
                - transform: reverse, replicate
                - charwise: char_map, char_fold, char_traverse

- cipher/       Letter rotation
                - rot13: rot13

- combinators/  Shared building blocks
                - fixed_point: fixed_point, FixedPointConfig
                - applicative: Applicative, OPTIONAL, LIST

Logging goes through loguru and is disabled by default. Enable it with:
    from loguru import logger
    logger.enable("textprims")

Usage:
    from textprims import substitute, rot13, head
    from textprims.tagged import TaggedString, tag
"""

__version__ = "0.0.1"

from loguru import logger

from textprims.errors import (
    TextPrimsError,
    FixedPointNotReachedError,
    UnsupportedTargetError,
)

from textprims.tagged import (
    TaggedString,
    tag,
    run_tag,
    append,
    mconcat,
    IsString,
    from_string,
    register_is_string,
)

from textprims.construct import (
    from_chars,
    cons,
    snoc,
    char_range,
)

from textprims.access import (
    head,
    last,
    tail,
    init,
    index,
)

from textprims.text import (
    lines,
    unlines,
    words,
    unwords,
    substitute,
    substitute_many,
    capitalize,
    cap_words,
    rightpad,
    leftpad,
    rightpad_by,
    leftpad_by,
    reverse,
    replicate,
    char_map,
    char_fold,
    char_traverse,
)

from textprims.cipher import rot13

from textprims.combinators import (
    fixed_point,
    FixedPointConfig,
    Applicative,
    OPTIONAL,
    LIST,
)

logger.disable("textprims")

__all__ = [
    "__version__",
    # errors
    "TextPrimsError",
    "FixedPointNotReachedError",
    "UnsupportedTargetError",
    # tagged
    "TaggedString",
    "tag",
    "run_tag",
    "append",
    "mconcat",
    "IsString",
    "from_string",
    "register_is_string",
    # construct
    "from_chars",
    "cons",
    "snoc",
    "char_range",
    # access
    "head",
    "last",
    "tail",
    "init",
    "index",
    # text
    "lines",
    "unlines",
    "words",
    "unwords",
    "substitute",
    "substitute_many",
    "capitalize",
    "cap_words",
    "rightpad",
    "leftpad",
    "rightpad_by",
    "leftpad_by",
    "reverse",
    "replicate",
    "char_map",
    "char_fold",
    "char_traverse",
    # cipher
    "rot13",
    # combinators
    "fixed_point",
    "FixedPointConfig",
    "Applicative",
    "OPTIONAL",
    "LIST",
]
