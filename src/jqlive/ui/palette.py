from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    prompt: str
    dim: str
    shorthand_name: str
    shorthand_expr: str
    # Status banner roles
    banner_bg: str
    banner_fg: str
    banner_stale_bg: str
    banner_stale_fg: str
    banner_idle_bg: str
    banner_idle_fg: str


DEFAULT = Palette(
    prompt="#ffa657",
    dim="#6b7280",
    shorthand_name="#5ea1ff",
    shorthand_expr="#d7ba7d",
    banner_bg="#10b981",
    banner_fg="#ffffff",
    banner_stale_bg="#b36b00",
    banner_stale_fg="#ffffff",
    banner_idle_bg="#1f2430",
    banner_idle_fg="#d8dee9",
)

# Selected palette for now
PALETTE = DEFAULT
