"""Shared font factory with module-level cache."""

from __future__ import annotations
import pygame

_cache: dict[tuple[str, int, bool], pygame.font.Font] = {}


def get_font(size: int, bold: bool = False, name: str = "consolas") -> pygame.font.Font:
    key = (name, size, bold)
    if key not in _cache:
        if not pygame.font.get_init():
            pygame.font.init()
        _cache[key] = pygame.font.SysFont(name, size, bold=bold)
    return _cache[key]


def wrap_text(text: str, font: pygame.font.Font, max_w: int) -> list[str]:
    """Word-wrap text to max_w pixels; blank lines separate paragraphs."""
    result = []
    for para in text.split("\n"):
        if not para.strip():
            result.append("")
            continue
        line = ""
        for word in para.split(" "):
            candidate = (line + " " + word).strip()
            if font.size(candidate)[0] <= max_w:
                line = candidate
            else:
                if line:
                    result.append(line)
                line = word
        if line:
            result.append(line)
    return result
