"""Helpers for passing generators around."""

from shirorand.utils.random import ensure_generator, spawn

__all__ = ["ensure_generator", "spawn"]
