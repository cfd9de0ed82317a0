"""PLONK verifier building blocks: manifests, containers, settings and widget arithmetic."""

__version__ = "0.1.0"