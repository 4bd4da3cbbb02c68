"""
Passerelle presentation layer.
"""
