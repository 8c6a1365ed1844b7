"""Fetch companies and travel expenses, and print the company tree with rolled-up costs."""

from costtree.pipeline import run

__all__ = ["run"]
