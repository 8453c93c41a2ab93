"""Batch runs of many instances under several solver configurations."""

from scqbf.batch.discovery import discover_instances
from scqbf.batch.runner import CSV_HEADER, DEFAULT_CONFIGS, RunConfig, run_batch

__all__ = ["CSV_HEADER", "DEFAULT_CONFIGS", "RunConfig", "discover_instances", "run_batch"]
