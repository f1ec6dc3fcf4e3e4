"""Arkanoid visual skins."""

from .base import ArkanoidSkin
from .classic import ClassicSkin

__all__ = ['ArkanoidSkin', 'ClassicSkin']
