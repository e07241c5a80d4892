from .brownian import brownian_moments_table, serial_correlation
from .schemes import scheme_call_error_table

__all__ = [
    "brownian_moments_table",
    "serial_correlation",
    "scheme_call_error_table",
]
