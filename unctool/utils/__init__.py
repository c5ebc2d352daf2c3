"""Utility helpers for unctool."""

from .local_paths import absolute_local_path, expand_local_path, local_path_exists

__all__ = ["absolute_local_path", "expand_local_path", "local_path_exists"]
