"""Rendering of decode and transcode diagnostics.

Turns a Diagnostic into terminal text (rust, simple) or a JSON object for
tools. Byte offsets and the offending byte, code point or UTF-16 unit are
shown on their own lines in rust style.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# C0 controls and DEL, rendered as \xNN so hostile input cannot forge
# extra lines in terminals or log files.
_CONTROL_ESCAPES = {i: f"\\x{i:02x}" for i in (*range(0x20), 0x7F)}


class OutputFormat(StrEnum):
    """How DiagnosticFormatter renders a diagnostic."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Render Diagnostic objects for people or tools.

    Every free-text field passes through control-character escaping, so a
    message quoting hostile input stays on one line.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate message and hint text to max_content_length
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Character budget for truncated fields

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.invalid_lead(0xFF, 2)
        >>> print(formatter.format(diagnostic))
        error[INVALID_LEAD]: Invalid UTF-8 lead byte 0xFF at offset 2
          --> bytes 2..3
          = octet: 0xFF
          = help: Lead bytes are 0x00-0x7F, 0xC0-0xDF, 0xE0-0xEF or 0xF0-0xF7
          = note: see https://datatracker.ietf.org/doc/html/rfc3629#section-3

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        INVALID_LEAD: Invalid UTF-8 lead byte 0xFF at offset 2
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics.

        Args:
            diagnostics: Iterable of diagnostics to format

        Returns:
            Formatted string with all diagnostics separated by blank lines
        """
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[INCOMPLETE_SEQUENCE]: Incomplete 3-byte UTF-8 sequence at offset 4: ...
              --> bytes 4..6
              = octet: 0xE2
              = help: Continuation bytes are 0x80-0xBF
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.span:
            parts.append(f"  --> bytes {diagnostic.span.start}..{diagnostic.span.end}")

        if diagnostic.octet is not None:
            parts.append(f"  = octet: 0x{diagnostic.octet:02X}")

        if diagnostic.code_point is not None:
            parts.append(f"  = code point: {_format_code_point(diagnostic.code_point)}")

        if diagnostic.unit is not None:
            parts.append(f"  = unit: 0x{diagnostic.unit:04X}")

        if diagnostic.hint:
            hint = self._maybe_sanitize(diagnostic.hint)
            parts.append(f"  = help: {hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            INVALID_LEAD: Invalid UTF-8 lead byte 0xFF at offset 2
        """
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "INVALID_LEAD", "code_value": 1001, "message": "...", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.octet is not None:
            data["octet"] = diagnostic.octet

        if diagnostic.code_point is not None:
            data["code_point"] = diagnostic.code_point

        if diagnostic.unit is not None:
            data["unit"] = diagnostic.unit

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Escape control characters, then truncate if sanitization is enabled.

        Args:
            text: Text to render

        Returns:
            Escaped, possibly truncated text
        """
        text = text.translate(_CONTROL_ESCAPES)
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text


def _format_code_point(value: int) -> str:
    """Render a code point as U+XXXX, or as a decimal when negative."""
    if value < 0:
        return str(value)
    return f"U+{value:04X}"
