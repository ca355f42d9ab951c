"""Integration tests for complete criterion imports against the bundled catalogue."""

from datetime import date
from decimal import Decimal
from typing import Any, Dict

import orjson
import pytest

from espd_app.criteria.export import records_to_json
from espd_app.criteria.models import (
    CriminalConvictionsCriterion,
    EconomicFinancialStandingCriterion,
    OtherCriterion,
    PurelyNationalGrounds,
    TechnicalProfessionalCriterion,
)
from espd_app.engine import EspdImportEngine


@pytest.fixture(scope="module")
def engine() -> EspdImportEngine:
    return EspdImportEngine()


@pytest.mark.integration
class TestFullImport:
    """Integration tests for the complete import pipeline."""

    def test_unanswered_purely_national_grounds(
        self, engine: EspdImportEngine, purely_national_criterion: Dict[str, Any]
    ) -> None:
        """Test that an unanswered criterion keeps its identifying metadata."""
        result = engine.import_criterion(purely_national_criterion)
        record = result.record

        assert isinstance(record, PurelyNationalGrounds)
        assert record.exists is False
        assert record.answer is None
        assert record.metadata.id == "63adb07d-db1b-4ef0-a14e-a99785cf8cf6"
        assert record.metadata.name == "Purely national exclusion grounds"
        assert record.metadata.type_code == "EXCLUSION.OTHER"
        assert record.metadata.legislation_reference == "57(4)"
        assert result.clean

    def test_two_contract_references(
        self, engine: EspdImportEngine, contract_references_criterion: Dict[str, Any]
    ) -> None:
        """Test that two occurrences of an unbounded group yield two independent records."""
        result = engine.import_criterion(contract_references_criterion)
        record = result.record

        assert isinstance(record, TechnicalProfessionalCriterion)
        assert record.exists is True
        assert len(record.unbounded_groups) == 2

        first, second = record.unbounded_groups
        assert first == {"description": "Office furniture", "amount": Decimal("125000"), "currency": "EUR"}
        assert second == {"description": "IT equipment", "amount": Decimal("80000.50"), "currency": "RON"}
        assert record.description is None
        assert result.clean

    def test_criminal_convictions(self, engine: EspdImportEngine, convictions_criterion: Dict[str, Any]) -> None:
        """Test a fully answered exclusion ground with nested sub-records."""
        result = engine.import_criterion(convictions_criterion)
        record = result.record

        assert isinstance(record, CriminalConvictionsCriterion)
        assert record.answer is True
        assert record.date_of_conviction == date(2015, 3, 10)
        assert record.reason == "Fraud"
        assert record.convicted == "Managing director"
        assert record.period_length == "5 years"
        assert record.self_cleaning.answer is True
        assert record.self_cleaning.description == "Staff replaced"
        assert record.available_electronically.answer is True
        assert record.available_electronically.url == "https://registry.example.eu/1"
        assert record.available_electronically.code == "CR-123"
        assert record.available_electronically.issuer == "Ministry of Justice"
        assert result.clean

    def test_legacy_yearly_turnover(self, engine: EspdImportEngine) -> None:
        """Test a pre-2016.12 document with three sibling yearly turnover groups."""
        yearly = [
            ("188f5d5a-5958-44b9-bcf4-f9f49f3647d7", "0b7c7de8-5dfb-4815-917f-9e660c797cf8",
             "7aa6ed12-454f-483d-9f29-bcb9bf1f7550", "2013", "1000000 EUR"),
            ("b68c8c47-7d9d-418f-a2ad-a6c39d6b68a4", "df667733-f113-4128-a177-841de2421cef",
             "f3ea9cdd-1b6c-4849-8fa5-da7d91e8519f", "2014", "1200000 EUR"),
            ("191ca6e0-b074-464e-bc7e-8ad63c3c7d9d", "870b32c5-472e-4859-96d2-75f8be3e713d",
             "53a20eef-85b2-4695-b280-a9cc93043b26", "2015", "1500000.75 EUR"),
        ]
        criterion = {
            "id": "499efc97-2ac1-4af2-9e84-323c2ca67747",
            "typeCode": "SELECTION.ECONOMIC_FINANCIAL_STANDING",
            "name": "General yearly turnover",
            "requirementGroups": [
                {
                    "id": "714e2fed-135b-4364-9aa5-5489eb40715b",
                    "requirements": [
                        {"id": "dd4f8396-604e-4b4b-9ee7-ddfe0046f60e", "responses": ["3"]},
                    ],
                    "requirementGroups": [
                        {
                            "id": group_id,
                            "requirements": [
                                {"id": year_id, "responses": [year]},
                                {"id": amount_id, "responses": [amount]},
                            ],
                        }
                        for group_id, year_id, amount_id, year, amount in yearly
                    ],
                },
            ],
        }

        result = engine.import_criterion(criterion)
        record = result.record

        assert isinstance(record, EconomicFinancialStandingCriterion)
        assert record.number_of_years == 3
        assert [g["year"] for g in record.unbounded_groups] == [2013, 2014, 2015]
        assert record.unbounded_groups[2] == {"year": 2015, "amount": Decimal("1500000.75"), "currency": "EUR"}
        assert (record.amount1, record.amount3, record.currency3) == (Decimal("1000000"), Decimal("1500000.75"), "EUR")
        assert result.clean

    def test_group_roles_of_economic_operator(self, engine: EspdImportEngine) -> None:
        """Test an 'other' criterion mixing fixed fields and an unbounded group."""
        criterion = {
            "id": "ee51100f-8e3e-40c7-8c0c-d2f2d9b6a1a1",
            "typeCode": "DATA_ON_ECONOMIC_OPERATOR",
            "name": "Economic operator participating in a procurement procedure together with others",
            "requirementGroups": [
                {
                    "id": "b1074a0a-3927-433f-9822-b06e09d2b867",
                    "requirements": [
                        {"id": "d2919a5f-9564-4d61-95ba-d79c2222ac6c", "responses": ["true"]},
                        {"id": "fac08938-f236-4ebd-b544-e878cd0479e7", "responses": ["35,5"]},
                        {"id": "41616955-0529-437b-aa14-7a642fa4f8f9", "responses": ["not mapped"]},
                    ],
                    "requirementGroups": [
                        {
                            "id": "b861a8c5-9a6c-4a52-91ff-ccd45fab0e39",
                            "requirements": [
                                {"id": "0cf8d998-117b-4902-8805-3e3d7739bb9c", "responses": ["Leader"]},
                                {"id": "a88c48b6-ac7f-4460-b767-dc6bbed7e6a8", "responses": ["Consortium A"]},
                            ],
                        },
                    ],
                },
            ],
        }

        result = engine.import_criterion(criterion)
        record = result.record

        assert isinstance(record, OtherCriterion)
        assert record.answer is True
        assert record.double_value1 == Decimal("35.5")
        assert record.unbounded_groups == [{"role": "Leader", "group_name": "Consortium A"}]
        assert result.clean

    def test_document_to_json(
        self,
        engine: EspdImportEngine,
        purely_national_criterion: Dict[str, Any],
        contract_references_criterion: Dict[str, Any],
    ) -> None:
        """Test rendering a whole imported document as JSON."""
        results = engine.import_criteria([purely_national_criterion, contract_references_criterion])
        data = orjson.loads(records_to_json([r.record for r in results]))

        assert [item["type"] for item in data] == ["PurelyNationalGrounds", "TechnicalProfessionalCriterion"]
        assert data[0]["metadata"]["legislation_reference"] == "57(4)"
        assert data[1]["unbounded_groups"][1]["amount"] == "80000.50"
