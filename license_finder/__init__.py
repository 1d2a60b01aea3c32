"""
License Finder: detects the open-source licenses contained in a source tree.
"""

__version__ = "1.0.0"
