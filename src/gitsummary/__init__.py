"""gitsummary — concise change summary for a Git working tree."""

__version__ = "0.1.0"
