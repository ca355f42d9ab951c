"""Pytest configuration and shared fixtures."""

import copy
from pathlib import Path
from typing import Any, Dict

import pytest

import espd_app.config
from espd_app.definitions.loader import load_registry, registry_from_mapping
from espd_app.definitions.registry import DefinitionRegistry
from espd_app.importing.dispatcher import CriterionDispatcher
from espd_app.importing.walker import TreeWalker

BUNDLED_CATALOGUE = Path(espd_app.config.__file__).parent / "criteria.yaml"

# Small hand-written catalogue; ids are readable so tree shapes stay obvious
TEST_CATALOGUE: Dict[str, Any] = {
    "version": "test",
    "groups": [
        {"id": "g-fixed"},
        {"id": "g-nested"},
        {"id": "g-repeat", "unbounded": True},
        {"id": "g-inner-repeat", "unbounded": True},
    ],
    "requirements": [
        {"id": "r-answer", "description": "Your answer", "response_type": "INDICATOR", "fields": ["answer"]},
        {"id": "r-description", "description": "Description", "response_type": "DESCRIPTION",
         "fields": ["description"]},
        {"id": "r-amount", "description": "Amount", "response_type": "AMOUNT", "fields": ["amount", "currency"]},
        {"id": "r-year", "description": "Year", "response_type": "QUANTITY_YEAR", "fields": ["year"]},
        {"id": "r-date", "description": "Date of conviction", "response_type": "DATE",
         "fields": ["date_of_conviction"]},
        {"id": "r-url", "description": "URL", "response_type": "EVIDENCE_URL",
         "fields": ["available_electronically.url"]},
        {"id": "r-turnover", "description": "Average turnover", "response_type": "AMOUNT",
         "fields": ["average_turnover", "average_turnover_currency"]},
        {"id": "r-unmapped", "description": "Not mapped", "response_type": "DESCRIPTION", "fields": []},
        {"id": "r-stale", "description": "Stale mapping", "response_type": "DESCRIPTION",
         "fields": ["no_such_field"]},
    ],
    "aliases": {
        "requirements": {
            "r-old-description": "r-description",
            "r-old-amount": "r-amount",
            "r-older-description": "r-description",
        },
        "groups": {"g-old-repeat": "g-repeat"},
    },
}


@pytest.fixture
def test_catalogue() -> Dict[str, Any]:
    """Mutable copy of the test catalogue."""
    return copy.deepcopy(TEST_CATALOGUE)


@pytest.fixture
def registry(test_catalogue: Dict[str, Any]) -> DefinitionRegistry:
    """Registry built from the test catalogue."""
    return registry_from_mapping(test_catalogue, source="test")


@pytest.fixture
def walker(registry: DefinitionRegistry) -> TreeWalker:
    return TreeWalker(registry)


@pytest.fixture(scope="session")
def bundled_registry() -> DefinitionRegistry:
    """Registry built from the catalogue shipped with the package."""
    return load_registry(BUNDLED_CATALOGUE)


@pytest.fixture
def dispatcher(bundled_registry: DefinitionRegistry) -> CriterionDispatcher:
    return CriterionDispatcher(bundled_registry)


@pytest.fixture
def purely_national_criterion() -> Dict[str, Any]:
    """Unanswered purely national exclusion ground."""
    return {
        "id": "63adb07d-db1b-4ef0-a14e-a99785cf8cf6",
        "typeCode": "EXCLUSION.OTHER",
        "name": "Purely national exclusion grounds",
        "legislationReference": "57(4)",
        "requirementGroups": [],
    }


@pytest.fixture
def convictions_criterion() -> Dict[str, Any]:
    """Answered participation in a criminal organisation ground."""
    return {
        "id": "005eb9ed-1347-4ca3-bb29-9bc0db64e1ab",
        "typeCode": "EXCLUSION.CONVICTIONS",
        "name": "Participation in a criminal organisation",
        "legislationReference": "57(1)",
        "requirementGroups": [
            {
                "id": "29226a0d-f32b-4dba-a39a-3cd594da798c",
                "requirements": [
                    {"id": "502a05a7-9f31-4947-b900-0f53ae276416", "responses": ["true"]},
                ],
                "requirementGroups": [
                    {
                        "id": "86deb873-bee1-4ec8-99d5-de9c0bec7596",
                        "requirements": [
                            {"id": "e569d092-f504-4de9-88e5-76caf96dc701", "responses": ["2015-03-10"]},
                            {"id": "6870a207-8477-42e2-8ffe-c5770544bfeb", "responses": ["Fraud"]},
                            {"id": "369c8d46-eef2-4937-9b6e-3ae8a8b09c0e", "responses": ["Managing director"]},
                            {"id": "56c47d81-d63f-445d-bced-fbf2a083cf38", "responses": ["5 years"]},
                        ],
                    },
                    {
                        "id": "596a0ba0-c405-40ae-9e92-6d682398ec29",
                        "requirements": [
                            {"id": "525ce8f0-f44c-4928-a7f9-830a2a7b6bc9", "responses": ["true"]},
                            {"id": "3df0d4c7-05db-4054-83ec-18ecd50d028c", "responses": ["Staff replaced"]},
                        ],
                    },
                ],
            },
            {
                "id": "6de4a816-29ac-4068-97bb-51f032b1df6b",
                "requirements": [
                    {"id": "4d9d9cfa-3836-49f6-98e7-8a0acc5b7541", "responses": ["true"]},
                    {"id": "1296373a-43d0-44c5-a029-3bdd64d5ca7b", "responses": ["https://registry.example.eu/1"]},
                    {"id": "204e5f77-d447-4ed5-aa20-fbf683d83f9f", "responses": ["CR-123"]},
                    {"id": "26ab360f-c0eb-4c27-892c-65f0037ccdcf", "responses": ["Ministry of Justice"]},
                ],
            },
        ],
    }


@pytest.fixture
def contract_references_criterion() -> Dict[str, Any]:
    """Technical ability criterion listing two past contracts."""
    return {
        "id": "cdd3bb3e-34e1-4c6d-b5c9-1d1a0a4d2a00",
        "typeCode": "SELECTION.TECHNICAL_PROFESSIONAL_ABILITY",
        "name": "For supply contracts: performance of deliveries of the specified type",
        "legislationReference": "58(4)",
        "requirementGroups": [
            {
                "id": "714e2fed-135b-4364-9aa5-5489eb40715b",
                "requirementGroups": [
                    {
                        "id": "39329465-8c07-4e08-8958-4994b78decf4",
                        "requirements": [
                            {"id": "430f4c90-48e0-4cb7-98eb-d6a7956a82bd", "responses": ["Office furniture"]},
                            {"id": "abacfa1d-6103-4096-ad78-6d2c2cd373fe", "responses": ["125000 EUR"]},
                        ],
                    },
                    {
                        "id": "39329465-8c07-4e08-8958-4994b78decf4",
                        "requirements": [
                            {"id": "430f4c90-48e0-4cb7-98eb-d6a7956a82bd", "responses": ["IT equipment"]},
                            {"id": "abacfa1d-6103-4096-ad78-6d2c2cd373fe", "responses": ["80000.50 RON"]},
                        ],
                    },
                ],
            },
        ],
    }
