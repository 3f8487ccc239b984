"""Shared domain primitives"""
