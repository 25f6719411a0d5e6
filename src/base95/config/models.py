"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, base95.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ChainConfig(BaseModel):
    """[chain] section — defaults for ``base95 chain``."""

    model_config = {"frozen": True}

    toward: Literal["zero", "one"] = "zero"
    steps: int = Field(default=30, ge=1)


class SimulateConfig(BaseModel):
    """[simulate] section — defaults for ``base95 simulate``."""

    model_config = {"frozen": True}

    inserts: int = Field(default=1000, ge=0)
    seed: int = 0


class Base95Config(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    chain: ChainConfig = Field(default_factory=ChainConfig)
    simulate: SimulateConfig = Field(default_factory=SimulateConfig)
