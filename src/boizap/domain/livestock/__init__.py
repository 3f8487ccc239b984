"""Livestock domain - species, management systems, growth defaults and batches"""
