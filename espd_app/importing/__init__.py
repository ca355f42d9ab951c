"""
Criterion import module.

Tree walker, field assigner and criterion dispatcher that turn requirement
trees of an ESPD response into typed criterion records.
"""

from .assigner import FieldAssigner
from .dispatcher import CriterionDispatcher
from .models import CriterionImportResult, ImportIssues
from .walker import TreeWalker

__all__ = ["CriterionDispatcher", "CriterionImportResult", "FieldAssigner", "ImportIssues", "TreeWalker"]
