"""Valuation domain - growth and revenue arithmetic"""

from .engine import ResultSummary, compute_valuation, final_weight_per_animal

__all__ = [
    'ResultSummary',
    'compute_valuation',
    'final_weight_per_animal',
]
