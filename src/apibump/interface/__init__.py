"""Public interface production (build collaborator)."""

from apibump.interface.builder import BuildResult, InterfaceBuilder

__all__ = ["BuildResult", "InterfaceBuilder"]
