"""
Interfaces between the core and its collaborators
"""

from pixel_breakout.core.interfaces.font import GlyphProvider

__all__ = ["GlyphProvider"]
