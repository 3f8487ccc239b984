"""Market application services"""
