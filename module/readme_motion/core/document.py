"""Document shell: wraps a widget body into one self-contained SVG file.

No scripting; all motion is declarative SMIL (``<animate>``, ``<set>``,
``<animateTransform>``), which GitHub's sanitizer keeps.
"""

from __future__ import annotations

from pathlib import Path

from .utils import num

SVG_NS = "http://www.w3.org/2000/svg"


def svg_document(width: float, height: float, body: str, background: str | None = None) -> str:
    """Return a complete SVG document string for *body*."""
    w, h = num(width), num(height)
    bg = f'\n  <rect width="100%" height="100%" fill="{background}"/>' if background else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" xmlns="{SVG_NS}">'
        f"{bg}\n"
        f"{body}\n"
        "</svg>\n"
    )


def write_svg(path: Path, markup: str) -> Path:
    """Write one SVG file (UTF-8), creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(markup)
    return path
