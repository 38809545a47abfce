"""Matrix calculator with determinants, transposes, cofactors and inverses, plus console box and menu helpers."""

__version__ = "1.0.0"
__all__ = ["boxes", "cli", "console", "matrix", "menu", "text"]