"""
In-memory monitor record API.
It groups the HTTP layer and the shared settings/logging helpers under one import path.
Most functionality lives in the sibling packages; this file intentionally stays lightweight.
"""

__version__ = "0.1.0"
