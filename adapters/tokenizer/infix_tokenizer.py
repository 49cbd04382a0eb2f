"""
Adapter: InfixTokenizer
Implementuje port Tokenizer.

Normalizacja (w tej kolejności):
  1. usunięcie wszystkich białych znaków
  2. niejawne mnożenie:  2x → 2*x,  2( → 2*(,  )x / )2 / )( → )*…,
     x2 / x( → x*2 / x*(  — chyba że litery przed "(" kończą się nazwą
     funkcji (sin( zostaje sin(, nie s*in( )
  3. unarny minus → "0-" tam, gdzie oczekiwany jest operand
     (początek, po "(", po innym operatorze)

Skanowanie:
  cyfry/kropki  → NUMBER (walidowane regexem liczby)
  litery[cyfry] → FUNCTION jeśli nazwa jest wspierana, inaczej VARIABLE
  + - * / ^ ( ) → OPERATOR / LEFT_PAREN / RIGHT_PAREN
  cokolwiek innego → ParseError
"""
from __future__ import annotations

import logging
import re
import string

from contracts import BINARY_OPERATORS, SUPPORTED_FUNCTIONS, Token, TokenType
from errors import ParseError

logger = logging.getLogger("exprfold.tokenizer")

_WHITESPACE_RE = re.compile(r"\s+")
_NUMBER_RE = re.compile(r"-?\d+(\.\d+)?([eE][+-]?\d+)?")
_IDENTIFIER_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9]*")

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.OPERATOR,
    "-": TokenType.OPERATOR,
    "*": TokenType.OPERATOR,
    "/": TokenType.OPERATOR,
    "^": TokenType.OPERATOR,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}


def _is_letter(ch: str) -> bool:
    return ch in string.ascii_letters


def _is_digit(ch: str) -> bool:
    return ch in string.digits


def _ends_with_function(text: str) -> bool:
    return any(text.endswith(name) for name in SUPPORTED_FUNCTIONS)


class InfixTokenizer:
    """Tokenizer wyrażeń infiksowych z niejawnym mnożeniem i unarnym minusem."""

    # -- Tokenizer protocol ------------------------------------------------

    def normalize(self, text: str) -> str:
        compact = _WHITESPACE_RE.sub("", text)
        with_products = self._insert_implicit_multiplication(compact)
        normalized = self._rewrite_unary_minus(with_products)
        logger.debug("Normalized %r -> %r", text, normalized)
        return normalized

    def tokenize(self, text: str) -> list[Token]:
        return self._scan(self.normalize(text))

    # -- Prywatne ----------------------------------------------------------

    def _insert_implicit_multiplication(self, text: str) -> str:
        out: list[str] = []
        for i, ch in enumerate(text):
            out.append(ch)
            if i + 1 < len(text) and self._needs_multiplication(text, i):
                out.append("*")
        return "".join(out)

    @staticmethod
    def _needs_multiplication(text: str, pos: int) -> bool:
        current, following = text[pos], text[pos + 1]

        if _is_digit(current):
            return _is_letter(following) or following == "("

        if current == ")":
            return _is_digit(following) or _is_letter(following) or following == "("

        if _is_letter(current) and (_is_digit(following) or following == "("):
            return not _ends_with_function(text[: pos + 1])

        return False

    @staticmethod
    def _rewrite_unary_minus(text: str) -> str:
        out: list[str] = []
        expect_operand = True
        for ch in text:
            if ch == "-" and expect_operand:
                out.append("0-")
            else:
                out.append(ch)
            expect_operand = ch == "(" or ch in BINARY_OPERATORS
        return "".join(out)

    def _scan(self, text: str) -> list[Token]:
        tokens: list[Token] = []
        buffer = ""

        for ch in text:
            if _is_digit(ch) or ch == ".":
                buffer += ch
            elif _is_letter(ch):
                # Litera po liczbie zaczyna nowy token
                if buffer and not _is_letter(buffer[0]):
                    tokens.append(self._flush(buffer))
                    buffer = ""
                buffer += ch
            elif ch in _SINGLE_CHAR_TOKENS:
                if buffer:
                    tokens.append(self._flush(buffer))
                    buffer = ""
                tokens.append(Token(type=_SINGLE_CHAR_TOKENS[ch], value=ch))
            else:
                raise ParseError(f"Unknown character: {ch!r}", code="1002", expression=text)

        if buffer:
            tokens.append(self._flush(buffer))
        return tokens

    @staticmethod
    def _flush(buffer: str) -> Token:
        if _is_letter(buffer[0]):
            if not _IDENTIFIER_RE.fullmatch(buffer):
                raise ParseError(f"Malformed identifier: {buffer!r}", code="1003")
            if buffer in SUPPORTED_FUNCTIONS:
                return Token(type=TokenType.FUNCTION, value=buffer)
            return Token(type=TokenType.VARIABLE, value=buffer)

        if not _NUMBER_RE.fullmatch(buffer):
            raise ParseError(f"Malformed number: {buffer!r}", code="1003")
        return Token(type=TokenType.NUMBER, value=buffer)
