"""gogen — argument driver for Go source-code generators."""

__version__ = "0.1.0"
