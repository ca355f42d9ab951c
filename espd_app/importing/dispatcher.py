"""
Criterion dispatcher: maps criterion type codes to record variants and builders.
"""

from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import Optional, Union

from ..config.defaults import ParserParams
from ..criteria.models import (
    BankruptcyCriterion,
    ConflictInterestCriterion,
    CriminalConvictionsCriterion,
    CriterionMetadata,
    CriterionRecord,
    EconomicFinancialStandingCriterion,
    LawCriterion,
    MisconductDistortionCriterion,
    OtherCriterion,
    PurelyNationalGrounds,
    QualityAssuranceCriterion,
    SatisfiesAllCriterion,
    SuitabilityCriterion,
    TaxesCriterion,
    TechnicalProfessionalCriterion,
)
from ..criteria.requirements import AMOUNT_SEQUENCE, DESCRIPTION_SEQUENCE, SELECTION_YOUR_ANSWER
from ..criteria.type_codes import CriterionTypeCode
from ..data.models import AmountValue, BooleanValue, CriterionNode, GroupNode, TextValue
from ..definitions.registry import DefinitionRegistry
from ..errors import UnsupportedCriterionTypeError
from ..logging.config import get_import_logger
from .models import CriterionImportResult, ImportIssues
from .walker import TreeWalker

logger = get_import_logger(__name__)


class CriterionDispatcher:
    """
    Builds criterion records from criterion type codes and requirement trees.

    Owns the closed table of supported type codes. Several legal grounds have
    an identical record shape and differ only in meaning; they map to the same
    variant and are built by the same routine.
    """

    def __init__(self, registry: DefinitionRegistry, parser_params: Optional[ParserParams] = None,
                 walker: Optional[TreeWalker] = None) -> None:
        self.registry = registry
        self.walker = walker or TreeWalker(registry, parser_params=parser_params)

    @staticmethod
    def supported_codes() -> tuple[CriterionTypeCode, ...]:
        return tuple(_DISPATCH)

    @staticmethod
    def variant_for(type_code: Union[str, CriterionTypeCode]) -> Optional[type[CriterionRecord]]:
        """Record variant built for a type code, None if unsupported."""
        code = CriterionTypeCode.lookup(type_code)
        if code is None:
            return None
        return _DISPATCH[code][0]

    def build(self, type_code: Union[str, CriterionTypeCode],
              root_groups: Optional[Sequence[GroupNode]] = None,
              metadata: Optional[CriterionMetadata] = None,
              issues: Optional[ImportIssues] = None) -> CriterionRecord:
        """
        Build the record of one criterion.

        An unanswered criterion (no requirement groups) yields the variant
        with exists=False and every answer field at its default. Identifying
        metadata is kept on both paths.

        Args:
            type_code: Criterion type code from the source document
            root_groups: Top-level requirement groups, None if unanswered
            metadata: Identifying metadata of the source criterion
            issues: Collector for recovered faults of the current import

        Returns:
            The criterion record

        Raises:
            UnsupportedCriterionTypeError: If the type code is not supported
        """
        code = CriterionTypeCode.lookup(type_code)
        if code is None:
            name = metadata.name if metadata else None
            criterion_id = metadata.id if metadata else None
            raise UnsupportedCriterionTypeError(
                f"Could not build criterion '{name}' with id '{criterion_id}' "
                f"having type code '{type_code}'.",
                type_code=str(type_code),
                criterion_name=name,
                criterion_id=criterion_id,
            )

        variant, builder = _DISPATCH[code]
        if not root_groups:
            return variant(exists=False, metadata=metadata)

        if issues is None:
            issues = ImportIssues(metadata.id if metadata else None)

        return builder(self, variant(exists=True, metadata=metadata), root_groups, issues)

    def _build_walked(self, record: CriterionRecord, root_groups: Sequence[GroupNode],
                      issues: ImportIssues) -> CriterionRecord:
        return self.walker.apply(record, root_groups, issues)

    def _build_economic_financial_standing(self, record: EconomicFinancialStandingCriterion,
                                           root_groups: Sequence[GroupNode],
                                           issues: ImportIssues) -> CriterionRecord:
        self.walker.apply(record, root_groups, issues)

        # Re-reads are silent; the walk has already reported their faults
        for index, requirement_id in enumerate(AMOUNT_SEQUENCE, start=1):
            value = self.walker.read_requirement(requirement_id, root_groups)
            if isinstance(value, AmountValue):
                setattr(record, f"amount{index}", value.amount)
                setattr(record, f"currency{index}", value.currency)

        for index, requirement_id in enumerate(DESCRIPTION_SEQUENCE, start=1):
            value = self.walker.read_requirement(requirement_id, root_groups)
            if isinstance(value, TextValue):
                setattr(record, f"description{index}", value.value)
        return record

    def _build_technical_professional(self, record: TechnicalProfessionalCriterion,
                                      root_groups: Sequence[GroupNode],
                                      issues: ImportIssues) -> CriterionRecord:
        self.walker.apply(record, root_groups, issues)

        # The generic answer takes precedence over "allow checks"
        definition = self.registry.find_requirement_by_id(SELECTION_YOUR_ANSWER)
        if definition is not None:
            value = self.walker.read_answer(definition, root_groups)
            if isinstance(value, BooleanValue):
                record.answer = value.value
        return record

    def import_criterion(self, node: CriterionNode) -> CriterionImportResult:
        """
        Import one criterion tree.

        Args:
            node: Criterion tree from the source document

        Returns:
            The record with the faults recovered while building it

        Raises:
            UnsupportedCriterionTypeError: If the type code is not supported
        """
        metadata = CriterionMetadata(
            id=node.id,
            name=node.name,
            type_code=node.type_code,
            legislation_reference=node.legislation_reference,
        )
        issues = ImportIssues(node.id)
        record = self.build(node.type_code, node.groups, metadata, issues)

        logger.debug(
            "Criterion imported",
            criterion_id=node.id,
            type_code=node.type_code,
            exists=record.exists,
            issues=len(issues),
        )
        return CriterionImportResult(record=record, issues=list(issues))


Builder = Callable[[CriterionDispatcher, CriterionRecord, Sequence[GroupNode], ImportIssues], CriterionRecord]

Code = CriterionTypeCode
_walked = CriterionDispatcher._build_walked

# Type code -> (record variant, builder). Codes sharing a variant share a builder.
_DISPATCH: Mapping[CriterionTypeCode, tuple[type[CriterionRecord], Builder]] = MappingProxyType({
    Code.CRIMINAL_CONVICTIONS: (CriminalConvictionsCriterion, _walked),
    Code.PAYMENT_OF_TAXES: (TaxesCriterion, _walked),
    Code.PAYMENT_OF_SOCIAL_SECURITY: (TaxesCriterion, _walked),
    Code.ENVIRONMENTAL_LAW: (LawCriterion, _walked),
    Code.SOCIAL_LAW: (LawCriterion, _walked),
    Code.LABOUR_LAW: (LawCriterion, _walked),
    Code.BANKRUPTCY_INSOLVENCY: (BankruptcyCriterion, _walked),
    Code.MISCONDUCT: (MisconductDistortionCriterion, _walked),
    Code.DISTORTING_MARKET: (MisconductDistortionCriterion, _walked),
    Code.CONFLICT_OF_INTEREST: (ConflictInterestCriterion, _walked),
    Code.OTHER_EXCLUSION: (PurelyNationalGrounds, _walked),
    Code.ALL_CRITERIA_SATISFIED: (SatisfiesAllCriterion, _walked),
    Code.SUITABILITY: (SuitabilityCriterion, _walked),
    Code.ECONOMIC_FINANCIAL_STANDING: (EconomicFinancialStandingCriterion,
                                       CriterionDispatcher._build_economic_financial_standing),
    Code.TECHNICAL_PROFESSIONAL_ABILITY: (TechnicalProfessionalCriterion,
                                          CriterionDispatcher._build_technical_professional),
    Code.QUALITY_ASSURANCE: (QualityAssuranceCriterion, _walked),
    Code.DATA_ON_ECONOMIC_OPERATOR: (OtherCriterion, _walked),
    Code.REDUCTION_OF_CANDIDATES: (OtherCriterion, _walked),
})
