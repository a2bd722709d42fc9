"""
Solidity compiler selection and optimizer settings.
"""

from dataclasses import dataclass, field
from typing import Dict

SOLC_VERSION = "0.8.20"
OPTIMIZER_RUNS = 200


@dataclass(frozen=True)
class OptimizerSettings:
    enabled: bool = True
    runs: int = OPTIMIZER_RUNS


@dataclass(frozen=True)
class CompilerSettings:
    optimizer: OptimizerSettings = field(default_factory=OptimizerSettings)
    via_ir: bool = True


@dataclass(frozen=True)
class CompilerSpec:
    """A compiler version plus the settings passed to it."""

    version: str = SOLC_VERSION
    settings: CompilerSettings = field(default_factory=CompilerSettings)

    @property
    def optimizer(self) -> OptimizerSettings:
        return self.settings.optimizer

    @property
    def via_ir(self) -> bool:
        return self.settings.via_ir

    def to_dict(self) -> Dict[str, object]:
        return {
            "version": self.version,
            "settings": {
                "optimizer": {
                    "enabled": self.settings.optimizer.enabled,
                    "runs": self.settings.optimizer.runs,
                },
                "viaIR": self.settings.via_ir,
            },
        }


SOLC = CompilerSpec()
