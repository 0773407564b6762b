#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tailshade/logic/config/parser.py

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from tailshade.core import config as c
from tailshade.core.errors import ConfigParseError

# str | int | float | bool | None | Dict[str, ConfigValue] | List[ConfigValue]
ConfigValue = Union[str, int, float, bool, None, Dict[str, Any], List[Any]]
ConfigDocument = Dict[str, ConfigValue]

NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
IDENT_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]+")

SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

LITERALS = {"true": True, "false": False, "null": None}


@dataclass
class ConfigModule:
    """A parsed config file: the exported object plus what surrounds it."""
    document: ConfigDocument = field(default_factory=dict)
    preamble: str = ""
    export: str = c.EXPORT_COMMONJS


class _Scanner:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def error(self, message: str) -> ConfigParseError:
        line = self.text.count("\n", 0, self.pos) + 1
        column = self.pos - (self.text.rfind("\n", 0, self.pos) + 1) + 1
        return ConfigParseError(message, line, column)

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def skip_trivia(self) -> None:
        """Skip whitespace, // line comments and /* block */ comments."""
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            if ch.isspace():
                self.pos += 1
            elif text.startswith("//", self.pos):
                end = text.find("\n", self.pos)
                self.pos = len(text) if end == -1 else end + 1
            elif text.startswith("/*", self.pos):
                end = text.find("*/", self.pos + 2)
                if end == -1:
                    raise self.error("unterminated block comment")
                self.pos = end + 2
            else:
                return

    def expect(self, token: str) -> None:
        self.skip_trivia()
        if not self.text.startswith(token, self.pos):
            found = self.peek() or "end of file"
            raise self.error(f"expected '{token}' but found '{found}'")
        self.pos += len(token)

    def identifier(self) -> str:
        m = IDENT_RE.match(self.text, self.pos)
        if not m:
            raise self.error("expected an identifier")
        self.pos = m.end()
        return m.group()

    def number(self) -> Union[int, float]:
        m = NUMBER_RE.match(self.text, self.pos)
        if not m:
            raise self.error("malformed number")
        self.pos = m.end()
        token = m.group()
        try:
            value = float(token)
            if not math.isfinite(value):
                raise ValueError(token)
            if any(ch in token for ch in ".eE"):
                return value
            return int(token)
        except ValueError:
            shown = token if len(token) <= 20 else f"{token[:20]}..."
            raise self.error(f"number out of range '{shown}'") from None

    def string(self) -> str:
        quote = self.text[self.pos]
        self.pos += 1
        chunks: List[str] = []
        text = self.text
        while True:
            if self.pos >= len(text):
                raise self.error("unterminated string")
            ch = text[self.pos]
            if ch == quote:
                self.pos += 1
                return "".join(chunks)
            if ch == "\n" and quote != "`":
                raise self.error("unterminated string")
            if quote == "`" and text.startswith("${", self.pos):
                raise self.error("template literal interpolation is not supported")
            if ch == "\\":
                chunks.append(self._escape())
                continue
            chunks.append(ch)
            self.pos += 1

    def _escape(self) -> str:
        text = self.text
        self.pos += 1
        if self.pos >= len(text):
            raise self.error("unterminated string")
        ch = text[self.pos]
        self.pos += 1
        if ch in SIMPLE_ESCAPES:
            return SIMPLE_ESCAPES[ch]
        if ch == "\n":
            return ""
        if ch == "x":
            return chr(self._hex_escape(2))
        if ch == "u":
            return self._unicode_escape()
        return ch

    def _unicode_escape(self) -> str:
        text = self.text
        if self.peek() == "{":
            end = text.find("}", self.pos)
            if end == -1:
                raise self.error("malformed unicode escape")
            digits = text[self.pos + 1 : end]
            self.pos = end + 1
            code = self._codepoint(digits)
        else:
            code = self._hex_escape(4)

        # a high surrogate followed by a low one (\uDC00-\uDFFF) is one code point
        if 0xD800 <= code <= 0xDBFF and text.startswith("\\u", self.pos):
            low_digits = text[self.pos + 2 : self.pos + 6]
            if len(low_digits) == 4 and HEX_DIGITS_RE.fullmatch(low_digits):
                low = int(low_digits, 16)
                if 0xDC00 <= low <= 0xDFFF:
                    self.pos += 6
                    code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)

        if 0xD800 <= code <= 0xDFFF:
            raise self.error(f"lone surrogate escape '\\u{code:04x}'")
        return chr(code)

    def _hex_escape(self, width: int) -> int:
        digits = self.text[self.pos : self.pos + width]
        if len(digits) != width:
            raise self.error(f"malformed escape sequence '{digits}'")
        self.pos += width
        return self._codepoint(digits)

    def _codepoint(self, digits: str) -> int:
        if not HEX_DIGITS_RE.fullmatch(digits):
            raise self.error(f"malformed escape sequence '{digits}'")
        code = int(digits, 16)
        if code > 0x10FFFF:
            raise self.error(f"malformed escape sequence '{digits}'")
        return code


def _parse_value(sc: _Scanner) -> ConfigValue:
    sc.skip_trivia()
    ch = sc.peek()
    if ch == "{":
        return _parse_object(sc)
    if ch == "[":
        return _parse_array(sc)
    if ch in "'\"`" and ch:
        return sc.string()
    if ch and (ch.isdigit() or ch in "-+."):
        return sc.number()
    if ch and IDENT_RE.match(ch):
        start = sc.pos
        name = sc.identifier()
        if name in LITERALS:
            return LITERALS[name]
        sc.pos = start
        raise sc.error(f"unsupported expression '{name}'")
    if not ch:
        raise sc.error("unexpected end of file")
    raise sc.error(f"unexpected character '{ch}'")


def _number_key(value: Union[int, float]) -> str:
    """Numeric property names take the key JS would give them: 1e3 -> '1000', 1.5 -> '1.5'."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def _parse_key(sc: _Scanner) -> str:
    ch = sc.peek()
    if ch in "'\"" and ch:
        return sc.string()
    if ch and ch.isdigit():
        return _number_key(sc.number())
    if ch and IDENT_RE.match(ch):
        return sc.identifier()
    if ch == "[":
        raise sc.error("computed keys are not supported")
    if sc.text.startswith("...", sc.pos):
        raise sc.error("spread properties are not supported")
    raise sc.error("expected a property name")


def _parse_object(sc: _Scanner) -> Dict[str, ConfigValue]:
    sc.expect("{")
    obj: Dict[str, ConfigValue] = {}
    while True:
        sc.skip_trivia()
        if sc.peek() == "}":
            sc.pos += 1
            return obj
        key = _parse_key(sc)
        sc.expect(":")
        obj[key] = _parse_value(sc)
        sc.skip_trivia()
        if sc.peek() == ",":
            sc.pos += 1
        elif sc.peek() != "}":
            raise sc.error("expected ',' or '}'")


def _parse_array(sc: _Scanner) -> List[ConfigValue]:
    sc.expect("[")
    items: List[ConfigValue] = []
    while True:
        sc.skip_trivia()
        if sc.peek() == "]":
            sc.pos += 1
            return items
        items.append(_parse_value(sc))
        sc.skip_trivia()
        if sc.peek() == ",":
            sc.pos += 1
        elif sc.peek() != "]":
            raise sc.error("expected ',' or ']'")


def _parse_export(sc: _Scanner) -> str:
    """Consume 'module.exports =' or 'export default', returning the canonical form."""
    sc.skip_trivia()
    word = sc.identifier() if IDENT_RE.match(sc.peek() or " ") else ""
    if word == "module":
        sc.expect(".")
        sc.skip_trivia()
        if sc.identifier() != "exports":
            raise sc.error("expected 'module.exports'")
        sc.expect("=")
        return c.EXPORT_COMMONJS
    if word == "export":
        sc.skip_trivia()
        if sc.identifier() != "default":
            raise sc.error("expected 'export default'")
        return c.EXPORT_ESM
    raise sc.error("expected 'module.exports =' or 'export default'")


def parse_document(text: str) -> ConfigDocument:
    return parse_config(text).document


def parse_config(text: str) -> ConfigModule:
    """
    Parse the text of a Tailwind config file into a ConfigModule.

    Only a single export of a plain object literal is understood. Leading
    comments are kept as the module preamble; comments elsewhere are
    dropped. Empty or whitespace-only text is an empty document.
    """
    if not text.strip():
        return ConfigModule()

    sc = _Scanner(text)
    sc.skip_trivia()
    preamble = text[: sc.pos].strip()

    export = _parse_export(sc)
    sc.skip_trivia()
    if sc.peek() != "{":
        raise sc.error("the exported value must be an object literal")
    document = _parse_object(sc)

    sc.skip_trivia()
    if sc.peek() == ";":
        sc.pos += 1
    sc.skip_trivia()
    if not sc.at_end():
        raise sc.error("unexpected content after the exported object")

    return ConfigModule(document=document, preamble=preamble, export=export)
