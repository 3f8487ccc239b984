"""Adapters - primary (driving) and secondary (driven)"""
