"""
PyGame front end for Pixel Breakout
"""
