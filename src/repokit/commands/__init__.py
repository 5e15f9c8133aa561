"""CLI command modules discovered by repokit.core.registry."""
