"""Configuration - settings, user preferences and dependency container"""
