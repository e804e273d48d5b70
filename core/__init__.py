#!/usr/bin/env python3
"""
Core extraction engine: line classification, per-file builders and the
whole-run resolver.
"""

from .model import TypeRecord, Arrow, FileModel, RunState

__all__ = [
    'TypeRecord', 'Arrow', 'FileModel', 'RunState',
]
