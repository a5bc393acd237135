"""benchsys - host environment snapshots for benchmark reports."""

__version__ = "0.1.0"
