"""Core domain logic: entity-graph assembly and the exception hierarchy."""

from userdir.core.graph_assembler import GraphAssembler

__all__ = ["GraphAssembler"]
