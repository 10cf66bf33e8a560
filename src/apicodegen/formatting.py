"""
Source formatters.

The generator assembles TypeScript by templating and hands the text to a
formatter, which returns the canonical layout or raises FormatError when the
text is not well formed. SourceFormatter runs in-process; PrettierFormatter
delegates to the prettier executable.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Protocol

from loguru import logger

from apicodegen.errors import FormatError

_OPENERS = {"{": "}", "[": "]", "(": ")"}
_CLOSERS = {closer: opener for opener, closer in _OPENERS.items()}
_QUOTES = frozenset("\"'`")


class Formatter(Protocol):
    def format(self, source: str) -> str: ...


@dataclass(frozen=True)
class _Line:
    text: str
    depth: int
    in_comment: bool


def _scan_lines(source: str) -> list[_Line]:
    """
    Split source into stripped lines annotated with their bracket depth.

    Brackets inside string literals and comments are ignored. Raises
    FormatError on mismatched or unclosed brackets, unterminated strings and
    unterminated block comments.
    """
    stack: list[tuple[str, int]] = []
    in_comment = False
    comment_start = 0
    lines: list[_Line] = []

    for lineno, raw in enumerate(source.splitlines(), start=1):
        text = raw.strip()
        starts_in_comment = in_comment
        depth = len(stack)
        leading = True
        quote: str | None = None
        i = 0

        while i < len(text):
            ch = text[i]

            if in_comment:
                if text.startswith("*/", i):
                    in_comment = False
                    i += 2
                    continue
                leading = False
                i += 1
                continue

            if quote:
                if ch == "\\":
                    i += 2
                    continue
                if ch == quote:
                    quote = None
                i += 1
                continue

            if text.startswith("//", i):
                break
            if text.startswith("/*", i):
                in_comment = True
                comment_start = lineno
                leading = False
                i += 2
                continue

            if ch in _QUOTES:
                quote = ch
            elif ch in _OPENERS:
                stack.append((ch, lineno))
            elif ch in _CLOSERS:
                if not stack or stack[-1][0] != _CLOSERS[ch]:
                    raise FormatError(f"Unexpected '{ch}' on line {lineno}: {text}")
                stack.pop()
                if leading:
                    depth = len(stack)
                i += 1
                continue

            if not ch.isspace():
                leading = False
            i += 1

        if quote:
            raise FormatError(f"Unterminated string literal on line {lineno}: {text}")

        lines.append(_Line(text=text, depth=depth, in_comment=starts_in_comment))

    if in_comment:
        raise FormatError(f"Unterminated comment opened on line {comment_start}")
    if stack:
        opener, lineno = stack[-1]
        raise FormatError(f"Unclosed '{opener}' opened on line {lineno}")

    return lines


@dataclass(frozen=True)
class SourceFormatter:
    """
    In-process formatter for generated declarations.

    Re-indents every line by bracket depth, aligns JSDoc continuation lines
    under the opening "/**", strips trailing whitespace, collapses runs of
    blank lines and ends the text with a single newline.
    """

    indent: int = 2

    def format(self, source: str) -> str:
        out: list[str] = []

        for line in _scan_lines(source):
            if not line.text:
                if out and out[-1]:
                    out.append("")
                continue

            text = line.text
            if line.in_comment and text.startswith("*"):
                text = " " + text
            out.append(" " * (self.indent * line.depth) + text)

        while out and not out[-1]:
            out.pop()

        return "\n".join(out) + "\n" if out else ""


@dataclass(frozen=True)
class PrettierFormatter:
    """Formats through the prettier executable (TypeScript parser, no semicolons)."""

    command: tuple[str, ...] = ("npx", "--no-install", "prettier")
    semi: bool = False
    timeout: float | None = 60.0

    def format(self, source: str) -> str:
        args = [*self.command, "--parser", "typescript"]
        if not self.semi:
            args.append("--no-semi")

        logger.debug(f"Running formatter: {' '.join(args)}")
        try:
            completed = subprocess.run(
                args,
                input=source,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise FormatError(f"Formatter executable not found: {self.command[0]}") from e
        except subprocess.TimeoutExpired as e:
            raise FormatError(f"Formatter timed out after {self.timeout} seconds") from e

        if completed.returncode != 0:
            message = completed.stderr.strip() or f"prettier exited with status {completed.returncode}"
            raise FormatError(message)

        return completed.stdout
