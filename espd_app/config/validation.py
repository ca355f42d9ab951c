"""Configuration validation utilities."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_parser_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate response parser parameters."""
        errors = []

        for token_field in ("true_tokens", "false_tokens"):
            if token_field in params:
                value = params[token_field]
                if (not isinstance(value, (list, tuple)) or not value
                        or not all(isinstance(token, str) and token.strip() for token in value)):
                    errors.append(ValidationError(
                        field=token_field,
                        message="Must be a non-empty list of non-blank strings",
                        value=value
                    ))

        # Tokens must not be ambiguous
        true_tokens = {str(t).lower() for t in params.get("true_tokens", []) if isinstance(t, str)}
        false_tokens = {str(t).lower() for t in params.get("false_tokens", []) if isinstance(t, str)}
        overlap = true_tokens & false_tokens
        if overlap:
            errors.append(ValidationError(
                field="false_tokens",
                message="Must not share tokens with true_tokens",
                value=sorted(overlap)
            ))

        if "extra_date_formats" in params:
            value = params["extra_date_formats"]
            if not isinstance(value, (list, tuple)):
                errors.append(ValidationError(
                    field="extra_date_formats",
                    message="Must be a list of strptime formats",
                    value=value
                ))
            else:
                for fmt in value:
                    if not isinstance(fmt, str) or not ConfigValidator._is_date_format(fmt):
                        errors.append(ValidationError(
                            field="extra_date_formats",
                            message="Must be a strptime format containing %Y, %m and %d",
                            value=fmt
                        ))

        for year_field in ("min_year", "max_year"):
            if year_field in params:
                value = params[year_field]
                if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                    errors.append(ValidationError(
                        field=year_field,
                        message="Must be a positive integer",
                        value=value
                    ))

        min_year = params.get("min_year")
        max_year = params.get("max_year")
        if isinstance(min_year, int) and isinstance(max_year, int) and min_year > max_year:
            errors.append(ValidationError(
                field="max_year",
                message="Must not be lower than min_year",
                value=max_year
            ))

        return errors

    @staticmethod
    def validate_registry_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate registry parameters."""
        errors = []

        if "definitions_file" in params:
            value = params["definitions_file"]
            if not isinstance(value, str) or not value.endswith((".yaml", ".yml", ".json")):
                errors.append(ValidationError(
                    field="definitions_file",
                    message="Must be a .yaml, .yml or .json file name",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(_LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "parser" in config:
            errors.extend(ConfigValidator.validate_parser_params(config["parser"]))

        if "registry" in config:
            errors.extend(ConfigValidator.validate_registry_params(config["registry"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors

    @staticmethod
    def _is_date_format(fmt: str) -> bool:
        if not all(token in fmt for token in ("%Y", "%m", "%d")):
            return False
        try:
            datetime(2016, 12, 31).strftime(fmt)
        except ValueError:
            return False
        return True
