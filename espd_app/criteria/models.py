"""
Criterion record models produced by the import engine.

Each criterion type code maps to one record variant. A record is either
absent (exists=False, all answer fields at their defaults) or populated by
one walk over the criterion's requirement tree. Variants holding repeatable
data (past contracts, yearly turnovers, ...) collect one DynamicGroupRecord
per occurrence of the unbounded requirement group.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Optional


class DynamicGroupRecord(dict):
    """Field values of one occurrence of an unbounded requirement group."""

    def put(self, field_name: str, value: Any) -> None:
        self[field_name] = value


@dataclass(frozen=True)
class CriterionMetadata:
    """Identifying metadata of the source criterion."""
    id: Optional[str] = None
    name: Optional[str] = None
    type_code: Optional[str] = None
    legislation_reference: Optional[str] = None


@dataclass
class SelfCleaning:
    """Self-cleaning measures declared for an exclusion ground."""
    answer: Optional[bool] = None
    description: Optional[str] = None


@dataclass
class AvailableElectronically:
    """Where the evidence for a criterion can be obtained electronically."""
    answer: Optional[bool] = None
    url: Optional[str] = None
    code: Optional[str] = None
    issuer: Optional[str] = None


@dataclass
class CriterionRecord:
    """Base of all criterion record variants."""
    exists: bool = False
    metadata: Optional[CriterionMetadata] = None


@dataclass
class UnboundedGroupsMixin:
    unbounded_groups: list[DynamicGroupRecord] = field(default_factory=list)


# Exclusion grounds

@dataclass
class ExclusionCriterion(CriterionRecord):
    answer: Optional[bool] = None
    description: Optional[str] = None
    self_cleaning: SelfCleaning = field(default_factory=SelfCleaning)
    available_electronically: AvailableElectronically = field(default_factory=AvailableElectronically)


@dataclass
class CriminalConvictionsCriterion(ExclusionCriterion):
    date_of_conviction: Optional[date] = None
    reason: Optional[str] = None
    convicted: Optional[str] = None
    period_length: Optional[str] = None


@dataclass
class TaxesCriterion(ExclusionCriterion):
    country: Optional[str] = None
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    breach_established_other_than_judicial_decision: Optional[bool] = None
    means_description: Optional[str] = None
    decision_final_and_binding: Optional[bool] = None
    date_of_conviction: Optional[date] = None
    period_length: Optional[str] = None
    eo_fulfilled_obligations: Optional[bool] = None
    obligations_description: Optional[str] = None


@dataclass
class LawCriterion(ExclusionCriterion):
    pass


@dataclass
class BankruptcyCriterion(ExclusionCriterion):
    reason: Optional[str] = None


@dataclass
class MisconductDistortionCriterion(ExclusionCriterion):
    pass


@dataclass
class ConflictInterestCriterion(ExclusionCriterion):
    pass


@dataclass
class PurelyNationalGrounds(ExclusionCriterion):
    pass


# Selection criteria

@dataclass
class SelectionCriterion(UnboundedGroupsMixin, CriterionRecord):
    answer: Optional[bool] = None
    description: Optional[str] = None
    available_electronically: AvailableElectronically = field(default_factory=AvailableElectronically)


@dataclass
class SatisfiesAllCriterion(SelectionCriterion):
    pass


@dataclass
class SuitabilityCriterion(SelectionCriterion):
    pass


@dataclass
class EconomicFinancialStandingCriterion(SelectionCriterion):
    number_of_years: Optional[int] = None
    average_turnover: Optional[Decimal] = None
    average_turnover_currency: Optional[str] = None
    # Filled from the pre-2016.12 sequential requirements only
    amount1: Optional[Decimal] = None
    currency1: Optional[str] = None
    amount2: Optional[Decimal] = None
    currency2: Optional[str] = None
    amount3: Optional[Decimal] = None
    currency3: Optional[str] = None
    amount4: Optional[Decimal] = None
    currency4: Optional[str] = None
    amount5: Optional[Decimal] = None
    currency5: Optional[str] = None
    description1: Optional[str] = None
    description2: Optional[str] = None
    description3: Optional[str] = None
    description4: Optional[str] = None
    description5: Optional[str] = None


@dataclass
class TechnicalProfessionalCriterion(SelectionCriterion):
    specify: Optional[str] = None
    percentage: Optional[Decimal] = None


@dataclass
class QualityAssuranceCriterion(SelectionCriterion):
    pass


# Other criteria (data on the economic operator, reduction of candidates)

@dataclass
class OtherCriterion(UnboundedGroupsMixin, CriterionRecord):
    answer: Optional[bool] = None
    description1: Optional[str] = None
    description2: Optional[str] = None
    description3: Optional[str] = None
    description5: Optional[str] = None
    boolean_value1: Optional[bool] = None
    boolean_value3: Optional[bool] = None
    double_value1: Optional[Decimal] = None
    available_electronically: AvailableElectronically = field(default_factory=AvailableElectronically)


def has_unbounded_groups(record: CriterionRecord) -> bool:
    """True if the record variant can hold dynamic group records."""
    return isinstance(record, UnboundedGroupsMixin)
