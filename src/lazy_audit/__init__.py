"""lazy-audit: composable dry-run aware actions behind an audit CLI."""

__version__ = "0.1.0"
