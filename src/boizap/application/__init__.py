"""Application layer - commands, queries and behaviors"""
