"""
Synthetic data seeding pipeline.

Exports: ImportOrchestrator, ImportResult
"""

from .models import ImportResult
from .orchestrator import ImportOrchestrator

__all__ = ["ImportOrchestrator", "ImportResult"]
