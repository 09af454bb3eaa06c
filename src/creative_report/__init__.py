"""Monthly creative-work declaration generator for JetBrains Space code reviews."""

__version__ = "0.1.0"
