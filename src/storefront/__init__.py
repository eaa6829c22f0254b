"""
Storefront state engine

Two message-driven stores (product catalog and shopping cart) built on a
model/update/effects pattern.
"""

__version__ = "0.1.0"
