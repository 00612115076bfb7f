"""Output sinks and rendering helpers for the rair shell."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Optional, Sequence, TextIO, Tuple, Union

from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style

if TYPE_CHECKING:  # pragma: no cover
    from .context import ShellContext

Span = Tuple[str, Optional[str]]
Message = Union[str, Sequence[Span]]

HEX_WIDTH = 16


class Writer:
    """A redirectable text sink.

    A writer either targets a process channel (resolved on every write so
    that swapping ``sys.stdout`` keeps working) or an in-memory buffer.
    Buffers never receive colour escape codes.  Text is always written
    verbatim; styles only add escape codes around it.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        *,
        stderr: bool = False,
        color: bool = True,
        force_terminal: Optional[bool] = None,
    ) -> None:
        self._stream = stream
        self._console = Console(
            file=stream,
            stderr=stderr,
            color_system="auto" if color else None,
            force_terminal=force_terminal,
            highlight=False,
            markup=False,
            emoji=False,
        )

    @classmethod
    def stdout(cls, *, color: bool = True) -> "Writer":
        return cls(color=color)

    @classmethod
    def stderr(cls, *, color: bool = True) -> "Writer":
        return cls(stderr=True, color=color)

    @classmethod
    def buffer(cls) -> "Writer":
        return cls(io.StringIO(), color=False)

    @property
    def is_buffer(self) -> bool:
        return isinstance(self._stream, io.StringIO)

    @property
    def styled(self) -> bool:
        return self._console.color_system is not None and not self._console.no_color

    def write(self, text: str) -> None:
        stream = self._console.file
        stream.write(text)
        stream.flush()

    def writeln(self, text: str = "") -> None:
        self.write(text + "\n")

    def write_span(self, text: str, style: Optional[str] = None) -> None:
        """Write *text* unchanged, wrapped in *style* escape codes when styling is on."""
        if style and text and self.styled:
            system = COLOR_SYSTEMS[self._console.color_system]
            text = Style.parse(style).render(text, color_system=system)
        self.write(text)

    def utf8_string(self) -> str:
        """Return everything captured so far by a buffer writer."""
        if not isinstance(self._stream, io.StringIO):
            raise TypeError("writer is not capturing output")
        return self._stream.getvalue()


def rgb_style(color: Sequence[int]) -> str:
    r, g, b = color
    return f"rgb({r},{g},{b})"


def error_msg(ctx: "ShellContext", title: str, message: Message) -> None:
    """Emit a two line error report on the diagnostic sink.

    *message* is either plain text or a sequence of ``(text, style)`` spans.
    """
    stderr = ctx.stderr
    stderr.write_span("Error:", "bold red")
    stderr.writeln(f" {title}")
    spans = [(message, None)] if isinstance(message, str) else message
    for text, style in spans:
        stderr.write_span(text, style)
    stderr.writeln()


def render_hex(writer: Writer, start: int, data: Sequence[Optional[int]], *, width: int = HEX_WIDTH) -> None:
    """Print *data* as rows of hex bytes followed by an ASCII column.

    ``None`` entries mark bytes that could not be read; they render as
    ``##`` in the hex column and ``.`` in the ASCII column.
    """
    for offset in range(0, len(data), width):
        chunk = data[offset : offset + width]
        hex_text = " ".join("##" if byte is None else f"{byte:02X}" for byte in chunk)
        padding = width - len(chunk)
        if padding > 0:
            hex_text += "   " * padding
        ascii_text = "".join(chr(byte) if byte is not None and 32 <= byte < 127 else "." for byte in chunk)
        writer.writeln(f"0x{start + offset:08X}: {hex_text}  {ascii_text}")


__all__ = ["Writer", "error_msg", "render_hex", "rgb_style"]
