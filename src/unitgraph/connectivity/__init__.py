"""Connectivity utilities."""

from unitgraph.connectivity.topology_compile import CompiledConnections, compile_connections

__all__ = ["CompiledConnections", "compile_connections"]
