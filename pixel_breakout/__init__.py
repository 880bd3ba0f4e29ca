"""
Pixel Breakout: a bouncing ball, a paddle and a row of bricks, rasterized in software
"""

__version__ = "0.1.0"
