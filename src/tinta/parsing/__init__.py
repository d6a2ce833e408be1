"""Inline parsing: escape handling, reference tables and the pass pipeline.

The pipeline itself lives in ``tinta.parsing.inline``.
"""
