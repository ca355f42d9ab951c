"""Unit tests for the definition registry."""

import pytest

from espd_app.definitions.models import GroupDefinition, RequirementDefinition, ResponseType, ValueKind
from espd_app.definitions.registry import DefinitionRegistry


@pytest.fixture
def small_registry() -> DefinitionRegistry:
    return DefinitionRegistry(
        requirements=[
            RequirementDefinition("req-year", "Year", ResponseType.QUANTITY_YEAR, ("year",)),
            RequirementDefinition("req-amount", "Amount", ResponseType.AMOUNT, ("amount", "currency")),
        ],
        groups=[
            GroupDefinition("grp-main"),
            GroupDefinition("grp-yearly", unbounded=True),
        ],
        requirement_aliases={"old-year-1": "req-year", "old-year-2": "req-year"},
        group_aliases={"old-yearly": "grp-yearly"},
    )


class TestLookups:
    """Test suite for requirement and group lookups."""

    def test_find_requirement(self, small_registry: DefinitionRegistry) -> None:
        """Test lookup of a canonical requirement id."""
        definition = small_registry.find_requirement_by_id("req-amount")
        assert definition is not None
        assert definition.response_type is ResponseType.AMOUNT
        assert definition.fields == ("amount", "currency")

    def test_find_group(self, small_registry: DefinitionRegistry) -> None:
        """Test lookup of a canonical group id."""
        group = small_registry.find_group_by_id("grp-yearly")
        assert group is not None
        assert group.unbounded is True

    @pytest.mark.parametrize("missing_id", [None, "", "not-there"])
    def test_absent_ids(self, small_registry: DefinitionRegistry, missing_id) -> None:
        """Test that absent ids return None instead of raising."""
        assert small_registry.find_requirement_by_id(missing_id) is None
        assert small_registry.find_group_by_id(missing_id) is None

    def test_requirement_and_group_ids_are_separate(self, small_registry: DefinitionRegistry) -> None:
        """Test that a group id is not found as a requirement and vice versa."""
        assert small_registry.find_requirement_by_id("grp-main") is None
        assert small_registry.find_group_by_id("req-year") is None


class TestAliasing:
    """Test suite for legacy id aliasing."""

    def test_legacy_requirement_resolves_to_canonical(self, small_registry: DefinitionRegistry) -> None:
        """Test that legacy ids yield the canonical definition."""
        canonical = small_registry.find_requirement_by_id("req-year")
        assert small_registry.find_requirement_by_id("old-year-1") is canonical
        assert small_registry.find_requirement_by_id("old-year-2") is canonical

    def test_legacy_group_resolves_to_canonical(self, small_registry: DefinitionRegistry) -> None:
        """Test that legacy group ids yield the canonical group."""
        assert small_registry.find_group_by_id("old-yearly") is small_registry.find_group_by_id("grp-yearly")

    def test_resolve_ids(self, small_registry: DefinitionRegistry) -> None:
        """Test id rewriting; unknown ids pass through unchanged."""
        assert small_registry.resolve_requirement_id("old-year-1") == "req-year"
        assert small_registry.resolve_requirement_id("req-year") == "req-year"
        assert small_registry.resolve_requirement_id("whatever") == "whatever"
        assert small_registry.resolve_group_id("old-yearly") == "grp-yearly"

    def test_legacy_flags(self, small_registry: DefinitionRegistry) -> None:
        """Test legacy id detection and reverse lookup."""
        assert small_registry.is_legacy_requirement_id("old-year-2")
        assert not small_registry.is_legacy_requirement_id("req-year")
        assert small_registry.legacy_ids_for("req-year") == ("old-year-1", "old-year-2")
        assert small_registry.legacy_ids_for("req-amount") == ()


class TestImmutability:
    """Test suite for registry immutability."""

    def test_tables_are_read_only(self, small_registry: DefinitionRegistry) -> None:
        """Test that lookup tables cannot be modified."""
        with pytest.raises(TypeError):
            small_registry.requirements["new"] = None  # type: ignore[index]
        with pytest.raises(TypeError):
            small_registry.group_aliases["x"] = "grp-main"  # type: ignore[index]

    def test_source_mappings_are_copied(self) -> None:
        """Test that changing the input aliases later does not change the registry."""
        aliases = {"old": "req"}
        registry = DefinitionRegistry(
            requirements=[RequirementDefinition("req", "R", ResponseType.DESCRIPTION, ("description",))],
            requirement_aliases=aliases,
        )
        aliases["other"] = "req"
        assert registry.find_requirement_by_id("other") is None

    def test_len_and_repr(self, small_registry: DefinitionRegistry) -> None:
        """Test size reporting."""
        assert len(small_registry) == 4
        assert "requirements=2" in repr(small_registry)
        assert "aliases=3" in repr(small_registry)


class TestDefinitionModels:
    """Test suite for definition models."""

    def test_primary_and_currency_fields(self) -> None:
        """Test target field accessors."""
        amount = RequirementDefinition("a", "Amount", ResponseType.AMOUNT, ("amount", "currency"))
        assert amount.primary_field == "amount"
        assert amount.currency_field == "currency"

        unmapped = RequirementDefinition("u", "Unmapped", ResponseType.DESCRIPTION)
        assert unmapped.primary_field is None
        assert unmapped.currency_field is None

        blank = RequirementDefinition("b", "Blank", ResponseType.DESCRIPTION, (" ",))
        assert blank.primary_field is None

    @pytest.mark.parametrize("response_type, kind", [
        (ResponseType.INDICATOR, ValueKind.BOOLEAN),
        (ResponseType.CODE_COUNTRY, ValueKind.TEXT),
        (ResponseType.QUANTITY_YEAR, ValueKind.INTEGER),
        (ResponseType.PERCENTAGE, ValueKind.DECIMAL),
        (ResponseType.AMOUNT, ValueKind.AMOUNT),
        (ResponseType.DATE, ValueKind.DATE),
    ])
    def test_value_kinds(self, response_type: ResponseType, kind: ValueKind) -> None:
        """Test response type to value kind mapping."""
        assert response_type.value_kind is kind

    def test_every_response_type_has_a_kind(self) -> None:
        """Test that no response type lacks a value kind."""
        for response_type in ResponseType:
            assert isinstance(response_type.value_kind, ValueKind)
