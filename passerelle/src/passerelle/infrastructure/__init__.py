"""
Passerelle infrastructure layer.
"""
