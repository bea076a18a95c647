"""Workspace-wide WebAssembly test orchestrator."""

__version__ = "0.1.0"
