"""
Spelling word bank and distractor engine.
Loads tiered word data, serves indexed lookups and builds multiple-choice spelling items.
"""

__version__ = "0.3.0"
