"""
rop_demo — narrated walkthrough of the rop Result combinators.

Registers a user from JSON (parse, validate, create, enrich, format) and
exercises bind, pipe, map, tee, tee_e, or_else and attempt on small
numeric examples, logging every step with structlog.
"""

__version__ = "1.0.0"
