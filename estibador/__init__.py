"""Estibador de Ilusiones: a pygame game with a menu, a settings screen and a state stack."""

__version__ = "0.1.0"
__all__ = ["__version__"]