"""CLI command groups for ccgraph."""
