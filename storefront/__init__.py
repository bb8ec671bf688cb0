"""
Storefront service: catalog, orders and content storage behind one async
contract, with in-memory and relational backends.
"""

__version__ = "0.1.0"
