"""Voice search: route spoken queries to the right search and answer aloud."""

__version__ = "1.0.0"
