"""
Port: Tokenizer
Odpowiedzialność: zamiana surowego tekstu wyrażenia na płaską listę tokenów.
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Tokenizer(Protocol):
    def normalize(self, text: str) -> str:
        """
        Strips whitespace, inserts implicit multiplication ("2x" -> "2*x",
        ")(" -> ")*(") and rewrites unary minus to "0-".
        Returns the normalized text; never raises.
        """
        ...

    def tokenize(self, text: str) -> list[Token]:
        """
        Normalizes the text and scans it into NUMBER, VARIABLE, FUNCTION,
        OPERATOR, LEFT_PAREN and RIGHT_PAREN tokens.
        Raises ParseError on an unknown character or a malformed number.
        """
        ...
