"""Valuation application services"""
