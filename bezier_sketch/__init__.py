"""
Interactive quadratic Bézier sketching tool.
"""
__version__ = "1.0.0"
