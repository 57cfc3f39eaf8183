"""
patentflow - Patent processing workflow engine

Governs how a patent record and its further-examination rounds move from
intake to completion: parallel Provisional and Complete Specification
tracks, role-scoped task queues, admin review with cascading rejection,
and an append-only timeline of every transition.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
