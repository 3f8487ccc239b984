"""Primary adapters"""
