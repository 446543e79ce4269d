"""Lexical grammar for ANSI escape sequences.

The grammar has two alternatives, tried in order:

- OSC: ESC ] ... ST, where the body is the shortest run up to the first
  string terminator (BEL, ESC \\ or the C1 ST character U+009C).
- CSI and related: ESC or the C1 CSI character U+009B, optional intermediates,
  an optional parameter block (``;`` or ``:`` separated) and a final byte.

An ESC ] that never reaches a terminator matches nothing; it is not re-read
as a CSI sequence with ``]`` as an intermediate.

Example:
    from ansi_regex.pattern import PATTERN

    PATTERN.sub("", "\\x1b[31mred\\x1b[0m")  # "red"
"""

import re

# Valid string terminators are BEL, ESC\ and 0x9C
ST = r"(?:\u0007|\u001B\\|\u009C)"

# OSC only: ESC ] ... ST, non-greedy up to the first terminator
OSC = rf"(?:\u001B\][\s\S]*?{ST})"

# Digits are spelled out as [0-9]; \d would also accept non-ASCII decimals
CSI = (
    r"(?!\u001B\])[\u001B\u009B][\[\]()#;?]*"
    r"(?:[0-9]{1,4}(?:[;:][0-9]{0,4})*)?"
    r"[0-9A-PR-TZc-nq-uy=><~]"
)

PATTERN_STRING = f"{OSC}|{CSI}"

# Compiled once; re.Pattern objects hold no scan state and are safe to share
PATTERN = re.compile(PATTERN_STRING)

__all__ = ["CSI", "OSC", "PATTERN", "PATTERN_STRING", "ST"]
