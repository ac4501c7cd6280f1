"""src/uriparts/version.py

Version information for uriparts.
"""

__version__ = "0.1.0"
