"""Rock/Paper/Scissors territory-conquest simulation."""

__version__ = "0.1.0"
