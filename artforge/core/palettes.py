"""Palette Catalog: fixed, ordered colour palettes.

Invariants:
    - Exactly 5 palettes of exactly 5 colours each; order is part of the output contract
    - STACKS_PALETTE is used only by the Stacks renderer, never drawn from PALETTES
"""

from artforge.core.domain_types import HexColor

Palette = tuple[HexColor, ...]

VIBRANT: Palette = tuple(map(HexColor, ("#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEAA7")))
BOLD: Palette = tuple(map(HexColor, ("#2C3E50", "#E74C3C", "#ECF0F1", "#3498DB", "#F39C12")))
STACKS: Palette = tuple(map(HexColor, ("#5c73f2", "#00d9ff", "#ff6b35", "#f7931a", "#9b59b6")))
DARK: Palette = tuple(map(HexColor, ("#1a1a2e", "#16213e", "#0f3460", "#e94560", "#533483")))
NEON: Palette = tuple(map(HexColor, ("#00b894", "#00cec9", "#0984e3", "#6c5ce7", "#fd79a8")))

PALETTES: tuple[Palette, ...] = (VIBRANT, BOLD, STACKS, DARK, NEON)

# Stacks style override: blue, cyan, bitcoin orange, white, midnight
STACKS_PALETTE: Palette = tuple(map(HexColor, ("#5c73f2", "#00d9ff", "#f7931a", "#ffffff", "#1a1a2e")))
