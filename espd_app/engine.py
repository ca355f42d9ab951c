"""
Main import engine coordinator.

Wires configuration, the definitions registry and the criterion dispatcher
together and imports the criteria of ESPD response documents.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.defaults import ParserParams, parser_params_from_dict
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import CriterionNode
from .definitions.loader import load_registry
from .definitions.registry import DefinitionRegistry
from .errors import UnsupportedCriterionTypeError
from .importing.dispatcher import CriterionDispatcher
from .importing.models import CriterionImportResult

logger = structlog.get_logger(__name__)


class EspdImportEngine:
    """
    Main coordinator for the criterion import pipeline.

    Manages the import pipeline:
    Criterion tree → Dispatcher → Tree Walker → Value Parser → Field Assigner → Record

    Configuration and the registry are loaded once, at construction. The
    engine keeps no per-import state, so it can be shared between threads.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None,
                 overrides: Optional[dict[str, Any]] = None,
                 registry: Optional[DefinitionRegistry] = None) -> None:
        """
        Initialize the import engine.

        Args:
            config_dir: Directory holding settings.yaml and the definitions file;
                the bundled config directory when omitted
            overrides: Configuration overrides, highest precedence
            registry: Prebuilt registry; skips loading the definitions file

        Raises:
            ValueError: If the merged configuration is invalid
            DefinitionLoadError: If the definitions file cannot be loaded
        """
        self.logger = logger
        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.config = self.config_loader.merge_config(overrides)

        validation_errors = ConfigValidator.validate_config(self.config)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            self.logger.error("Configuration validation failed", errors=error_msgs)
            raise ValueError(f"Invalid configuration: {'; '.join(error_msgs)}")

        self.parser_params: ParserParams = parser_params_from_dict(self.config["parser"])

        if registry is None:
            registry = load_registry(self.config_loader.definitions_path(self.config))
        self.registry = registry

        self.dispatcher = CriterionDispatcher(self.registry, parser_params=self.parser_params)

        self.logger.info("Criterion import engine initialized", registry=repr(self.registry))

    def import_criterion(self, node: Union[CriterionNode, dict[str, Any]]) -> CriterionImportResult:
        """
        Import a single criterion.

        Args:
            node: Criterion tree, or its JSON representation

        Returns:
            The criterion record with the faults recovered while building it

        Raises:
            UnsupportedCriterionTypeError: If the criterion type is not supported
        """
        if isinstance(node, dict):
            node = CriterionNode.from_dict(node)

        try:
            result = self.dispatcher.import_criterion(node)
        except UnsupportedCriterionTypeError as e:
            self.logger.error(
                "Unsupported criterion type",
                criterion_id=node.id,
                type_code=node.type_code,
                error=str(e),
            )
            raise

        if result.issues:
            self.logger.info(
                "Criterion imported with recovered faults",
                criterion_id=node.id,
                type_code=node.type_code,
                issue_count=len(result.issues),
            )
        return result

    def import_criteria(self, nodes: Iterable[Union[CriterionNode, dict[str, Any]]]) -> list[CriterionImportResult]:
        """
        Import all criteria of one response document.

        An unsupported criterion type aborts the whole document.

        Args:
            nodes: Criterion trees, or their JSON representations

        Returns:
            One result per criterion, in input order
        """
        results = [self.import_criterion(node) for node in nodes]

        self.logger.info(
            "Criteria imported",
            criterion_count=len(results),
            answered=sum(1 for r in results if r.record.exists),
            issue_count=sum(len(r.issues) for r in results),
        )
        return results
