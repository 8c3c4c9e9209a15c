"""CinePrompt: AI video prompt builder and share-link client."""

__version__ = "1.0.0"
