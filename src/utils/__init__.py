"""Shared utility helpers."""

__all__: list[str] = []
