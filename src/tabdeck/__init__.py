"""TabDeck - tabbed back-office shell with keep-alive views."""

__version__ = "0.3.0"
