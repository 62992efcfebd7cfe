"""Keyed record storage layer.

This module frames keyed entries into flat binary files and performs
whole-file upsert, lookup and delete against them.
"""
