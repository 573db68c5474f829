"""Question blueprint generation."""

from .allocation import allocate
from .service import PRESETS, generate_blueprint

__all__ = ["allocate", "generate_blueprint", "PRESETS"]
