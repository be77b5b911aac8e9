"""Adapters for the outside world: git repositories, patch files, tracing."""
