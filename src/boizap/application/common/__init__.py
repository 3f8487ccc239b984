"""Shared application components"""
