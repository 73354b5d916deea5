"""
Photolog: build a static photo feed from a JSON post index and a folder of JPEGs.

Usage:
    photolog            # build, then serve public/ on :8080
    photolog --once     # build only
    photolog --serve    # serve only
"""

__version__ = "0.1.0"
