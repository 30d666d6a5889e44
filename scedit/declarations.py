"""Detection of variable, macro and typedef declarations in C source lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

_C_SPACE = " \t\n\v\f\r"
_MAX_NAME = 128
_MAX_MEMBER_LINE = 1024


def _is_space(ch: str) -> bool:
    return ch != "" and ch in _C_SPACE


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_ident(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and _is_space(text[pos]):
        pos += 1
    return pos


def _ident_end(text: str, pos: int) -> int:
    while pos < len(text) and _is_ident(text[pos]):
        pos += 1
    return pos


def _starts_with_word(text: str, word: str) -> bool:
    """True if *text* begins with *word* followed by whitespace."""
    return text.startswith(word) and len(text) > len(word) and _is_space(text[len(word)])


@dataclass
class Identifier:
    """A declared name and the line it was found on."""

    name: str
    declaration_line: int


class DeclarationScanner:
    """Collects the variables, macros and typedef names declared in C source lines.

    Lines are fed one at a time with :meth:`detect`; multi-line ``typedef``
    blocks are tracked across calls.
    """

    def __init__(self, primitive_types: Iterable[str], keywords: Iterable[str]) -> None:
        self.primitive_types: List[str] = list(primitive_types)
        self.keywords = frozenset(keywords)
        self.variables: List[Identifier] = []
        self.typedefs: List[Identifier] = []
        self.in_multiline_comment = False
        self.typedef_waiting = False
        self._pending_tag = ""
        self._struct_depth = 0

    def reset(self) -> None:
        """Forget every declaration and any half-read typedef."""
        self.variables.clear()
        self.typedefs.clear()
        self.typedef_waiting = False
        self._pending_tag = ""
        self._struct_depth = 0

    def save_variable(self, name: Optional[str], line_num: int) -> bool:
        """Record a variable name; return whether it was added."""
        if not name or not (_is_alpha(name[0]) or name[0] == "_"):
            return False
        if any(v.declaration_line == line_num and v.name == name for v in self.variables):
            return False
        self.variables.append(Identifier(name, line_num))
        return True

    def save_typedef(self, name: Optional[str], line_num: int) -> bool:
        """Record a type alias; return whether it was added."""
        if not name:
            return False
        if any(t.name == name for t in self.typedefs):
            return False
        self.typedefs.append(Identifier(name, line_num))
        return True

    def remove_declarations_on_line(self, line_num: int) -> None:
        """Drop every variable and typedef declared on *line_num*."""
        self.variables = [v for v in self.variables if v.declaration_line != line_num]
        self.typedefs = [t for t in self.typedefs if t.declaration_line != line_num]

    def rescan_line(self, lines: Sequence[str], line_num: int) -> None:
        """Re-detect the declarations of one line after it has changed."""
        if not 0 <= line_num < len(lines):
            return
        self.remove_declarations_on_line(line_num)
        self.detect(lines[line_num], line_num)

    @staticmethod
    def _strip_comments(line: str) -> str:
        block = line.find("/*")
        if block >= 0:
            return line[:block]
        single = line.find("//")
        if single >= 0:
            return line[:single]
        return line

    def _typedef_start(self, text: str, line_num: int) -> None:
        semicolon = text.find(";")
        if semicolon >= 0:
            end = semicolon - 1
            while end > 0 and _is_space(text[end]):
                end -= 1
            start = end
            while start > 0 and _is_ident(text[start - 1]):
                start -= 1
            alias = text[start:end + 1]
            if 0 < len(alias) < _MAX_NAME:
                self.save_typedef(alias, line_num)
            return

        self.typedef_waiting = True
        self._pending_tag = ""
        pos = _skip_space(text, len("typedef"))
        rest = text[pos:]
        for keyword in ("struct", "union", "enum"):
            if _starts_with_word(rest, keyword):
                tag_start = _skip_space(text, pos + len(keyword))
                tag_end = _ident_end(text, tag_start)
                if 0 < tag_end - tag_start < _MAX_NAME:
                    self._pending_tag = text[tag_start:tag_end]
                break
        self._struct_depth = text.count("{")

    def _typedef_body(self, text: str, line_num: int) -> None:
        for pos, ch in enumerate(text):
            if ch == "{":
                self._struct_depth += 1
            elif ch == "}":
                if self._struct_depth > 0:
                    self._struct_depth -= 1
                if self._struct_depth == 0:
                    alias_start = _skip_space(text, pos + 1)
                    alias_end = _ident_end(text, alias_start)
                    length = alias_end - alias_start
                    if length > 0 and text[alias_end:alias_end + 1] == ";":
                        if length < _MAX_NAME:
                            self.save_typedef(text[alias_start:alias_end], line_num)
                    elif self._pending_tag:
                        self.save_typedef(self._pending_tag, line_num)
                    self.typedef_waiting = False
                    break

        if not (self.typedef_waiting and self._struct_depth > 0):
            return
        semicolon = text.find(";")
        if semicolon < 0 or "{" in text or "}" in text:
            return
        member = text[:min(semicolon, _MAX_MEMBER_LINE - 1)]
        last_space = member.rfind(" ")
        if last_space < 0:
            return
        for token in member[last_space + 1:].split(","):
            start = 0
            while start < len(token) and (_is_space(token[start]) or token[start] == "*"):
                start += 1
            end = _ident_end(token, start)
            if end > start:
                self.save_variable(token[start:end], line_num)

    def _define(self, text: str, line_num: int) -> None:
        pos = _skip_space(text, len("#define"))
        if pos < len(text) and (_is_alpha(text[pos]) or text[pos] == "_"):
            end = _ident_end(text, pos)
            if end > pos:
                self.save_variable(text[pos:end], line_num)

    def _declarations_after(
        self, text: str, type_name: str, line_num: int, skip_keywords: bool
    ) -> None:
        size = len(text)
        pos = text.find(type_name)
        while pos >= 0:
            after = pos + len(type_name)
            is_start = pos == 0 or not _is_ident(text[pos - 1])
            is_end = after >= size or not _is_ident(text[after])
            if not (is_start and is_end):
                pos = text.find(type_name, pos + 1)
                continue
            while after < size and (_is_space(text[after]) or text[after] == "*"):
                after += 1
            while after < size and text[after] != ";":
                while after < size and not _is_ident(text[after]):
                    after += 1
                if after >= size or text[after] == ";":
                    break
                var_end = _ident_end(text, after)
                if var_end > after:
                    name = text[after:var_end]
                    if not (skip_keywords and name in self.keywords):
                        self.save_variable(name, line_num)
                after = var_end
                while after < size and text[after] not in ",;":
                    after += 1
                if after < size and text[after] == ",":
                    after += 1
            pos = text.find(type_name, after)

    def detect(self, line: str, line_num: int) -> None:
        """Scan one source line and record the declarations it makes."""
        if self.in_multiline_comment:
            return
        working = self._strip_comments(line)
        text = working[_skip_space(working, 0):]

        if _starts_with_word(text, "typedef"):
            self._typedef_start(text, line_num)
            return
        if self.typedef_waiting:
            self._typedef_body(text, line_num)
            return
        if text.startswith("#define"):
            self._define(text, line_num)

        for type_name in self.primitive_types:
            if type_name:
                self._declarations_after(working, type_name, line_num, skip_keywords=True)
        for alias in list(self.typedefs):
            self._declarations_after(working, alias.name, line_num, skip_keywords=False)