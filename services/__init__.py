"""
Services - Business logic layer
"""
from . import cluster, gameserver, pod

__all__ = ["cluster", "gameserver", "pod"]
