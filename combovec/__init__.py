"""Fixed-capacity arrays and vectors with an overflow area."""

__version__ = "0.8.0"
__all__ = ["base", "re_arr", "combo_vec"]