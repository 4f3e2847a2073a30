"""
Responsive image markup for imgix-backed sites.

Computes a bounded set of breakpoint widths from a catalog of real-world
device viewports and renders an <img> element whose srcset points at
CDN-transformed variants of a single source image.
"""

__version__ = "0.1.0"

LIBRARY_NAME = "imgix-srcset"
