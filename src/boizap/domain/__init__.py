"""Domain layer - value objects, domain services and exceptions"""
