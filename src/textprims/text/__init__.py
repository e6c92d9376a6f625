"""
Text subpackage - pure string transforms.

Splitting/joining, substitution, casing, padding, reversal, replication
and character-wise map/fold/traverse.
"""

from textprims.text.splitting import (
    lines,
    unlines,
    words,
    unwords,
)

from textprims.text.substitution import (
    substitute,
    substitute_many,
)

from textprims.text.casing import (
    capitalize,
    cap_words,
)

from textprims.text.padding import (
    rightpad,
    leftpad,
    rightpad_by,
    leftpad_by,
)

from textprims.text.transform import (
    reverse,
    replicate,
)

from textprims.text.charwise import (
    char_map,
    char_fold,
    char_traverse,
)

__all__ = [
    # splitting
    "lines",
    "unlines",
    "words",
    "unwords",
    # substitution
    "substitute",
    "substitute_many",
    # casing
    "capitalize",
    "cap_words",
    # padding
    "rightpad",
    "leftpad",
    "rightpad_by",
    "leftpad_by",
    # transform
    "reverse",
    "replicate",
    # charwise
    "char_map",
    "char_fold",
    "char_traverse",
]
