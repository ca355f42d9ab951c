"""
Closed set of criterion type codes understood by the import engine.
"""

from enum import Enum
from typing import Optional


class CriterionCategory(str, Enum):
    """Top-level grouping of criteria in a response document."""
    EXCLUSION = "exclusion"
    SELECTION = "selection"
    OTHER = "other"


class CriterionTypeCode(str, Enum):
    """Criterion type codes, grouped by category."""

    # Exclusion grounds
    CRIMINAL_CONVICTIONS = "EXCLUSION.CONVICTIONS"
    PAYMENT_OF_TAXES = "EXCLUSION.CONTRIBUTIONS.PAYMENT_OF_TAXES"
    PAYMENT_OF_SOCIAL_SECURITY = "EXCLUSION.CONTRIBUTIONS.PAYMENT_OF_SOCIAL_SECURITY"
    ENVIRONMENTAL_LAW = "EXCLUSION.SOCIAL.ENVIRONMENTAL_LAW"
    SOCIAL_LAW = "EXCLUSION.SOCIAL.SOCIAL_LAW"
    LABOUR_LAW = "EXCLUSION.SOCIAL.LABOUR_LAW"
    BANKRUPTCY_INSOLVENCY = "EXCLUSION.BUSINESS.BANKRUPTCY_INSOLVENCY"
    MISCONDUCT = "EXCLUSION.BUSINESS.MISCONDUCT"
    DISTORTING_MARKET = "EXCLUSION.BUSINESS.DISTORTING_MARKET"
    CONFLICT_OF_INTEREST = "EXCLUSION.CONFLICT_OF_INTEREST"
    OTHER_EXCLUSION = "EXCLUSION.OTHER"

    # Selection criteria
    ALL_CRITERIA_SATISFIED = "SELECTION.ALL_SATISFIED"
    SUITABILITY = "SELECTION.SUITABILITY"
    ECONOMIC_FINANCIAL_STANDING = "SELECTION.ECONOMIC_FINANCIAL_STANDING"
    TECHNICAL_PROFESSIONAL_ABILITY = "SELECTION.TECHNICAL_PROFESSIONAL_ABILITY"
    QUALITY_ASSURANCE = "SELECTION.QUALITY_ASSURANCE"

    # Other criteria
    DATA_ON_ECONOMIC_OPERATOR = "DATA_ON_ECONOMIC_OPERATOR"
    REDUCTION_OF_CANDIDATES = "REDUCTION_OF_CANDIDATES"

    @property
    def category(self) -> CriterionCategory:
        if self.value.startswith("EXCLUSION."):
            return CriterionCategory.EXCLUSION
        if self.value.startswith("SELECTION."):
            return CriterionCategory.SELECTION
        return CriterionCategory.OTHER

    @classmethod
    def lookup(cls, code: Optional[str]) -> Optional["CriterionTypeCode"]:
        """Type code for a raw code string, None if it is not in the set."""
        if not code:
            return None
        try:
            return cls(code.strip())
        except ValueError:
            return None
