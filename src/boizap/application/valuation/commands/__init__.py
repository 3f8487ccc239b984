"""Valuation commands"""
from .run_valuation import RunValuationCommand, RunValuationHandler

__all__ = ['RunValuationCommand', 'RunValuationHandler']
