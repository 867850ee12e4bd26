"""Application layer: commands and queries orchestrating the domain."""
