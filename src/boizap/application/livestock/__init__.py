"""Livestock application services"""
