"""Default configuration parameters for the criterion import engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserParams:
    """Response value parsing parameters."""
    # Boolean tokens, matched case-insensitively
    true_tokens: tuple[str, ...] = ("true",)
    false_tokens: tuple[str, ...] = ("false",)

    # strptime formats tried after ISO 8601
    extra_date_formats: tuple[str, ...] = ()

    # Accepted range for QUANTITY_YEAR responses
    min_year: int = 1900
    max_year: int = 2100


@dataclass(frozen=True)
class RegistryParams:
    """Definition registry parameters."""
    definitions_file: str = "criteria.yaml"      # Relative to the config dir


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    parser: ParserParams
    registry: RegistryParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        parser=ParserParams(),
        registry=RegistryParams(),
        logging=LoggingParams(),
    )


def parser_params_from_dict(params: dict) -> ParserParams:
    """Build ParserParams from a merged configuration section."""
    defaults = ParserParams()
    return ParserParams(
        true_tokens=tuple(params.get("true_tokens", defaults.true_tokens)),
        false_tokens=tuple(params.get("false_tokens", defaults.false_tokens)),
        extra_date_formats=tuple(params.get("extra_date_formats", defaults.extra_date_formats)),
        min_year=params.get("min_year", defaults.min_year),
        max_year=params.get("max_year", defaults.max_year),
    )
