"""Line tokenizer for monthly climatological summary reports."""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum


class TokenKind(StrEnum):
    TITLE = "title"

    JAN = "JAN"
    FEB = "FEB"
    MAR = "MAR"
    APR = "APR"
    MAY = "MAY"
    JUN = "JUN"
    JUL = "JUL"
    AUG = "AUG"
    SEP = "SEP"
    OCT = "OCT"
    NOV = "NOV"
    DEC = "DEC"

    NUMBER = "number"
    WORD = "word"

    NAME = "NAME:"
    CITY = "CITY:"
    STATE = "STATE:"
    ELEV = "ELEV:"
    LAT = "LAT:"
    LONG = "LONG:"

    MISSING = "---"
    COLON = ":"
    DOT = "."

    # Characters no matcher accepts; grammar rules treat it as no token
    ERROR = "error"


MONTHS = {
    TokenKind.JAN: 1,
    TokenKind.FEB: 2,
    TokenKind.MAR: 3,
    TokenKind.APR: 4,
    TokenKind.MAY: 5,
    TokenKind.JUN: 6,
    TokenKind.JUL: 7,
    TokenKind.AUG: 8,
    TokenKind.SEP: 9,
    TokenKind.OCT: 10,
    TokenKind.NOV: 11,
    TokenKind.DEC: 12,
}

TITLE_LITERAL = "MONTHLY CLIMATOLOGICAL SUMMARY for "

_GENERIC = 1
_LITERAL = 2
# Both spellings FEB and FEV must beat every other rule of equal length
_FEBRUARY = 3

# (kind, pattern, priority). At each position the longest match wins,
# ties go to the highest priority.
MATCHERS: list[tuple[TokenKind, re.Pattern[str], int]] = [
    (TokenKind.TITLE, re.compile(re.escape(TITLE_LITERAL)), _LITERAL),
    (TokenKind.FEB, re.compile(r"FE(B|V)"), _FEBRUARY),
    *(
        (kind, re.compile(re.escape(kind.value)), _LITERAL)
        for kind in MONTHS
        if kind is not TokenKind.FEB
    ),
    *(
        (kind, re.compile(re.escape(kind.value)), _LITERAL)
        for kind in (
            TokenKind.NAME,
            TokenKind.CITY,
            TokenKind.STATE,
            TokenKind.ELEV,
            TokenKind.LAT,
            TokenKind.LONG,
        )
    ),
    (TokenKind.MISSING, re.compile(r"---"), _LITERAL),
    (TokenKind.COLON, re.compile(r":"), _LITERAL),
    (TokenKind.DOT, re.compile(r"\."), _LITERAL),
    (TokenKind.NUMBER, re.compile(r"-?[0-9]+(\.[0-9]+)?"), _GENERIC),
    (TokenKind.WORD, re.compile(r"[a-zA-Z]+"), _GENERIC),
]

_SKIP = re.compile(r"[ \t]+")


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int


def _match_at(line: str, pos: int) -> Token | None:
    best: tuple[int, int, TokenKind] | None = None
    for kind, pattern, priority in MATCHERS:
        m = pattern.match(line, pos)
        if m is None:
            continue
        candidate = (m.end() - pos, priority, kind)
        if best is None or candidate[:2] > best[:2]:
            best = candidate
    if best is None:
        return None
    length, _, kind = best
    return Token(kind=kind, text=line[pos:pos + length], position=pos)


def tokenize(line: str) -> Iterator[Token]:
    """Yield the tokens of one line, skipping spaces and tabs.

    A character no matcher accepts is yielded as a single ERROR token and
    lexing resumes right after it.
    """
    pos = 0
    end = len(line)
    while pos < end:
        skipped = _SKIP.match(line, pos)
        if skipped is not None:
            pos = skipped.end()
            if pos >= end:
                return

        token = _match_at(line, pos)
        if token is None:
            token = Token(kind=TokenKind.ERROR, text=line[pos], position=pos)
        yield token
        pos += len(token.text)


class Lexer:
    """Cursor over the tokens of a line, remembering the last token read."""

    def __init__(self, line: str):
        self.line = line
        self._tokens = tokenize(line)
        self.current: Token | None = None

    def next_token(self) -> Token | None:
        """Next token, or None at end of line."""
        self.current = next(self._tokens, None)
        return self.current

    def accept(self, kind: TokenKind) -> Token | None:
        """Consume the next token, returning it only if it has the given kind."""
        token = self.next_token()
        if token is None or token.kind is not kind:
            return None
        return token

    @property
    def slice(self) -> str:
        """Source text of the last token read, empty at end of line."""
        return self.current.text if self.current is not None else ""
