"""
VOID sentinel for fields absent from the validated data.
"""

from enum import Enum


class Void(Enum):
    """
    Sentinel standing in for a key that is missing from the input.

    A Hash schema substitutes VOID for every declared field it cannot find,
    so that validators can tell "absent" apart from "present with None".
    VOID is only ever matched by identity.

    Examples:
        Optional().validate(VOID)    # CLEAN: the field may be left out
        String().validate(VOID)      # Message("Expected String but got Nothing")
    """

    NOTHING = "Nothing"

    def __repr__(self) -> str:
        return self.value

    __str__ = __repr__


VOID = Void.NOTHING
