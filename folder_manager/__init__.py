"""
folder-manager: create or reuse a named project folder under a configured
base directory and open it alongside the Downloads folder.
"""

__version__ = "0.1.0"
