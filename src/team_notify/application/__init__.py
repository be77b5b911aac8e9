"""Application layer: registry, membership resolution and command handling."""
