"""Generate TypeScript declarations from GraphQL SDL files."""

__version__ = "0.1.0"
