"""
atomic-shadcn - Atomic design organizer for shadcn/ui components.

This package moves generated shadcn/ui components from ``components/ui`` into
atoms, molecules and organisms folders, keeps their barrel files in sync, and
rewrites the project's imports to match.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Public API
from atomic_shadcn.classification.classification_table import category_of, multi_export_symbols
from atomic_shadcn.models.domain_models import Category, OperationResult
from atomic_shadcn.services.atomic_service import AtomicService

__all__ = [
    "AtomicService",
    "Category",
    "OperationResult",
    "category_of",
    "multi_export_symbols",
]
