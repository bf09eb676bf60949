"""Core data models for fabriclaunch."""

from .entities import InvocationResult, Pattern

__all__ = ["InvocationResult", "Pattern"]
