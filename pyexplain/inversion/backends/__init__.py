"""Inversion backends."""

from pyexplain.inversion.backends.cpu import CPUGaussJordanBackend

__all__ = ["CPUGaussJordanBackend"]
