"""headermap: LLM-assisted mapping of German CSV headers to contact fields."""

__version__ = "0.1.0"
