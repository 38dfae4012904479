"""Effect registry: pluggable amplitude effects.

WHY: The CLI and the pipeline need a single lookup to find an effect by
key or by its command-line selector. A central dict makes it trivial to
add an effect: create the class, import it here, add one line.

HOW: EFFECTS maps string keys to effect *classes* (not instances).
SELECTORS is built from each effect's ``selector`` and maps the
command-line tokens to those keys.

RULES:
- Keys are snake_case identifiers
- Values are BaseEffect subclasses (not instances)
- Every selector in SELECTORS resolves to a key in EFFECTS
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wavdump.effects.fade import FadeInEffect, FadeOutEffect
from wavdump.effects.pan import PanEffect

if TYPE_CHECKING:
    from wavdump.effects.base import BaseEffect

EFFECTS: dict[str, type[BaseEffect]] = {
    "fade_in": FadeInEffect,
    "fade_out": FadeOutEffect,
    "pan": PanEffect,
}

SELECTORS: dict[str, str] = {cls().selector: key for key, cls in EFFECTS.items()}
