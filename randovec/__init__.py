"""
randovec: synthetic vector seeding for Weaviate.

Generates random text/vector records and bulk-loads them into a remote
Weaviate collection in fixed-size batches.
"""

__version__ = "0.1.0"
