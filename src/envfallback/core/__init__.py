"""Core components of envfallback."""
