from __future__ import annotations

import os
from dataclasses import dataclass

_LINE_ENDINGS = {"lf": "\n", "crlf": "\r\n"}


@dataclass(frozen=True)
class Settings:
    passthrough_marker: str
    unnumbered_headings: bool
    line_ending: str
    encoding: str


def _env(name: str, default: str) -> str:
    val = (os.environ.get(name) or default).strip()
    # Users often set env vars with quotes (e.g. cmd.exe: set MDTEX_ENCODING="utf-8").
    if (val.startswith('"') and val.endswith('"')) or (val.startswith("'") and val.endswith("'")):
        val = val[1:-1].strip()
    return val


def load_settings() -> Settings:
    marker = _env("MDTEX_PASSTHROUGH_MARKER", "mdtotex") or "mdtotex"
    unnumbered = _env("MDTEX_UNNUMBERED", "0").lower() in ("1", "true", "yes", "on")

    line_ending = _env("MDTEX_LINE_ENDING", "lf").lower()
    if line_ending not in _LINE_ENDINGS:
        raise ValueError(f"MDTEX_LINE_ENDING must be one of {sorted(_LINE_ENDINGS)}, got {line_ending!r}")

    encoding = _env("MDTEX_ENCODING", "utf-8") or "utf-8"

    return Settings(
        passthrough_marker=marker,
        unnumbered_headings=unnumbered,
        line_ending=_LINE_ENDINGS[line_ending],
        encoding=encoding,
    )
