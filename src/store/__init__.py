"""Filesystem save store layer.

This package maps relative store paths onto files beneath a root
save directory, selects codecs, and enumerates stored entries.
"""
