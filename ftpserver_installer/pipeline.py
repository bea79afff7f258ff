# Path and File Name : /home/ftpserver/installer/ftpserver_installer/pipeline.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Ordered phase runner - records a result per phase and halts on the first failure

"""
Provisioning Pipeline

Runs phases strictly in order. Each phase either completes (SUCCESS) or
raises InstallerError, which is recorded as FAILURE with the error message
as reason. No phase after a failure is executed (fail-closed).

Unexpected exceptions are NOT converted; they propagate to the caller.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from .errors import InstallerError


class PhaseStatus(Enum):
    """Phase outcome."""
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class Phase:
    """A named installation step."""
    name: str
    description: str
    action: Callable[[], None]


@dataclass
class PhaseResult:
    """Outcome of a single phase."""
    phase: str
    status: PhaseStatus
    reason: Optional[str] = None
    error: Optional[InstallerError] = None

    @property
    def succeeded(self) -> bool:
        return self.status is PhaseStatus.SUCCESS

    @classmethod
    def success(cls, phase: str) -> "PhaseResult":
        return cls(phase=phase, status=PhaseStatus.SUCCESS)

    @classmethod
    def failure(cls, phase: str, error: InstallerError) -> "PhaseResult":
        return cls(phase=phase, status=PhaseStatus.FAILURE, reason=str(error), error=error)


@dataclass
class PipelineReport:
    """Results of a pipeline run, in execution order."""
    results: List[PhaseResult] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return all(r.succeeded for r in self.results)

    @property
    def failed_phase(self) -> Optional[PhaseResult]:
        for result in self.results:
            if not result.succeeded:
                return result
        return None


class PipelineRunner:
    """Executes phases in order and stops at the first failure."""

    def __init__(self, phases: List[Phase], logger: logging.Logger):
        self.phases = phases
        self.logger = logger

    def run(self) -> PipelineReport:
        report = PipelineReport()
        total = len(self.phases)

        for index, phase in enumerate(self.phases, start=1):
            self.logger.info(f"[{index}/{total}] {phase.description}...")
            try:
                phase.action()
            except InstallerError as e:
                result = PhaseResult.failure(phase.name, e)
                report.results.append(result)
                self.logger.error(f"{phase.name} failed: {e}")
                skipped = total - index
                if skipped:
                    self.logger.error(f"Aborting: {skipped} remaining phase(s) not executed")
                break
            report.results.append(PhaseResult.success(phase.name))

        return report
