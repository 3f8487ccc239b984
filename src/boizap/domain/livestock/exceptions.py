"""Livestock valuation domain exceptions"""
from ..shared.exceptions import DomainException


class ValuationException(DomainException):
    """Base exception for growth projection and valuation"""
    pass


class InvalidCombinationError(ValuationException):
    """Raised when a management system is not legal for the species"""
    pass


class BatchValidationError(ValuationException):
    """Raised when batch parameters fail caller-side input validation"""
    pass


class ValuationInProgressError(ValuationException):
    """Raised when a valuation is triggered while another one is in flight"""
    pass
