"""
InfraCanvas - compiles canvas infrastructure graphs into deployment IR.
"""

__version__ = "0.4.0"
