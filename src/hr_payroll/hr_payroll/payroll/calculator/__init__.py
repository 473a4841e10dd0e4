from .assembler import assemble
from .deductions import compute_deductions
from .earnings import compute_earnings

__all__ = ["assemble", "compute_deductions", "compute_earnings"]
