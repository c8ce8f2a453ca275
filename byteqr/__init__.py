"""Byte-mode QR code generator for versions 1 to 4."""
from .encoding import encode
from .matrix import BLACK, UNSET, WHITE, Mask, add_data_information, construct_matrix
from .penalty import Penalty, evaluate, penalties
from .qr import find_best_mask, generate_qr, render_matrix
from .tables import InvalidVersion

__all__ = [
    "encode",
    "construct_matrix",
    "add_data_information",
    "find_best_mask",
    "render_matrix",
    "generate_qr",
    "evaluate",
    "penalties",
    "Penalty",
    "Mask",
    "InvalidVersion",
    "BLACK",
    "WHITE",
    "UNSET",
]
