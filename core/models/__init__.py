"""Reaction record models"""
from .videos import Video
from .reactions import Reaction

__all__ = ["Video", "Reaction"]
