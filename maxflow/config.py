"""
    Runtime settings for the solver, the CLI and the API.

    Settings are read from a YAML file whose keys override the defaults below.
    The file is given explicitly or through the MAXFLOW_CONFIG environment
    variable.
"""

import logging
import os
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import InvalidNetworkError

CONFIG_ENV = "MAXFLOW_CONFIG"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    representation: Literal["auto", "dense", "sparse"] = "auto"
    density_threshold: float = Field(0.1, ge=0, le=1)
    duplicate_policy: Literal["overwrite", "sum", "reject"] = "overwrite"
    flow_limit: Optional[int] = Field(2**63 - 1, gt=0)
    api_min_nodes: int = Field(2, ge=2)
    api_max_nodes: int = Field(64, ge=2)
    verbose_file_limit: int = Field(3, ge=0)
    flow_print_node_limit: int = Field(30, ge=0)
    csv_path: str = "network_flow_results.csv"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @model_validator(mode="after")
    def check_node_bounds(self):
        if self.api_min_nodes > self.api_max_nodes:
            raise ValueError("api_min_nodes must not exceed api_max_nodes")
        return self

    def check_node_count(self, n: int):
        if not self.api_min_nodes <= n <= self.api_max_nodes:
            raise InvalidNetworkError(
                f"n out of range [{self.api_min_nodes}, {self.api_max_nodes}]: {n}")


def load_settings(path: Optional[str] = None) -> Settings:
    if path is None:
        path = os.environ.get(CONFIG_ENV)
    if not path:
        return Settings()

    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}
    return Settings(**data)


def configure_logging(level: str = "WARNING"):
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
