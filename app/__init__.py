"""
Movie Search Widget Application Package.

This package contains the OMDb search client, the card grid renderer,
the search session state machine, and the API and UI surfaces built on them.
"""

__version__ = "1.0.0"
