import re
from typing import Optional

from eventbook.database.db import SQLITE_INT_MAX

# Decimal literals as JS ``Number()`` reads them; no underscores, no "nan"/"inf" spellings
DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
# Unsigned 0x / 0o / 0b literals
PREFIXED_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def parse_id(raw: str) -> Optional[int]:
    """
    Parse a path id the way a JS ``Number()`` cast would, then require an integer.
    " 7 ", "7.0" and "0x7" give 7; "abc", "1.5", "1_0" and "" give None, which matches no record.
    """
    text = raw.strip()
    if PREFIXED_RE.fullmatch(text):
        value = int(text, 0)
    elif DECIMAL_RE.fullmatch(text):
        number = float(text)
        if not number.is_integer():
            return None
        value = int(number)
    else:
        return None
    if abs(value) > SQLITE_INT_MAX:
        return None
    return value
