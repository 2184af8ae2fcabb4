"""Utility helpers for rst2mdx."""
