"""YAML config loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from candidate_portal.filtering.predicates import FilterParams


@dataclass
class DatasetConfig:
    source: str = "students.json"  # local path or http(s) URL
    timeout: int = 30


@dataclass
class FilterDefaults:
    ug_degree: str = "all"
    min_ug_cgpa: float = 0.0
    min_pg_cgpa: float = 0.0
    require_pg: bool = False
    min_exp: int = 0

    def to_params(self) -> FilterParams:
        """Parse configured defaults with the same leniency as user input."""
        return FilterParams.from_inputs(
            ug_degree=self.ug_degree,
            min_ug_cgpa=self.min_ug_cgpa,
            min_pg_cgpa=self.min_pg_cgpa,
            require_pg=self.require_pg,
            min_exp=self.min_exp,
        )


@dataclass
class ExportConfig:
    filename: str = "all_candidates_database.csv"


@dataclass
class WebConfig:
    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class AppConfig:
    dataset: DatasetConfig = field(default_factory=DatasetConfig)
    filters: FilterDefaults = field(default_factory=FilterDefaults)
    export: ExportConfig = field(default_factory=ExportConfig)
    web: WebConfig = field(default_factory=WebConfig)
    log_dir: str = "logs"
    log_level: str = "INFO"


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load configuration from a YAML file, filling in defaults."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Copy config.example.yaml to config.yaml and point dataset.source at your data."
        )

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    config = AppConfig()

    # Dataset (env var takes precedence)
    dataset_raw = raw.get("dataset") or {}
    config.dataset = DatasetConfig(
        source=os.environ.get("CANDIDATE_PORTAL_DATASET", dataset_raw.get("source", "students.json")),
        timeout=dataset_raw.get("timeout", 30),
    )

    # Filter defaults applied at startup and on reset
    filters_raw = raw.get("filters") or {}
    config.filters = FilterDefaults(
        ug_degree=filters_raw.get("ug_degree", "all"),
        min_ug_cgpa=filters_raw.get("min_ug_cgpa", 0.0),
        min_pg_cgpa=filters_raw.get("min_pg_cgpa", 0.0),
        require_pg=filters_raw.get("require_pg", False),
        min_exp=filters_raw.get("min_exp", 0),
    )

    export_raw = raw.get("export") or {}
    config.export = ExportConfig(
        filename=export_raw.get("filename", "all_candidates_database.csv"),
    )

    web_raw = raw.get("web") or {}
    config.web = WebConfig(
        host=web_raw.get("host", "127.0.0.1"),
        port=web_raw.get("port", 8000),
    )

    config.log_dir = raw.get("log_dir", "logs")
    config.log_level = raw.get("log_level", "INFO")

    return config


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    if not config.dataset.source:
        warnings.append("No dataset source configured - the portal will start empty")

    if not isinstance(config.web.port, int) or not 0 < config.web.port < 65536:
        warnings.append(f"Web port {config.web.port!r} is not a valid TCP port")

    params = config.filters.to_params()
    if params.min_ug_cgpa < 0 or params.min_pg_cgpa < 0:
        warnings.append("Negative CGPA filter default - it will match every record")

    if params.min_exp < 0:
        warnings.append("Negative experience filter default - it will match every record")

    return warnings
