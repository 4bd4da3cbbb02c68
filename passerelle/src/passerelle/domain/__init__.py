"""
Passerelle domain layer.
"""
