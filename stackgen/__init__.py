"""stackgen -- scaffolding for MongoDB-backed Go HTTP storage servers."""

__version__ = "0.1.0"
