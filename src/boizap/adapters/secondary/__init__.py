"""Secondary adapters"""
