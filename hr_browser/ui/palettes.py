from __future__ import annotations

from typing import Dict, List, Tuple

import plotly.colors as pc

# key -> (dropdown label, colour sequence)
PALETTES: Dict[str, Tuple[str, List[str]]] = {
    "blues": ("Corporate Blue & Grey", list(pc.sequential.Blues[2:9])),
    "viridis": ("Vibrant Gradients", list(pc.sequential.Viridis[:7])),
    "RdYlGn": ("Traffic Light System", list(pc.diverging.RdYlGn[1:8])),
    "Pastel1": ("Pastel Colors", list(pc.qualitative.Pastel1[:7])),
    "Dark2": ("Dark Theme", list(pc.qualitative.Dark2[:7])),
    "Spectral": ("Rainbow", list(pc.diverging.Spectral[:7])),
}

DEFAULT_PALETTE = "blues"


def get_palette(name: str | None) -> List[str]:
    """Colour sequence for a palette key; unknown keys fall back to the default."""
    _, colours = PALETTES.get(name or DEFAULT_PALETTE, PALETTES[DEFAULT_PALETTE])
    return colours


def palette_options() -> List[dict]:
    return [{"label": label, "value": key} for key, (label, _) in PALETTES.items()]
