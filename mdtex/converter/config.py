from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import Settings


@dataclass(frozen=True)
class ConvertConfig:
    passthrough_marker: str = "mdtotex"
    unnumbered_headings: bool = False  # \section*{...} keeps headings out of the TOC
    line_ending: str = "\n"
    encoding: str = "utf-8"

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ConvertConfig":
        return cls(
            passthrough_marker=settings.passthrough_marker,
            unnumbered_headings=settings.unnumbered_headings,
            line_ending=settings.line_ending,
            encoding=settings.encoding,
        )
