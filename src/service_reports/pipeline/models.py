"""Pipeline result models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ProcessingResult:
    """Result of processing a single input file"""

    input_path: str
    kind: str
    output_dir: str
    success: bool = True
    duration: float = 0.0
    records_count: int = 0
    lines_written: int = 0
    services: list[str] = field(default_factory=list)
    failed_services: dict[str, str] = field(default_factory=dict)
    error_message: str = ""

    @property
    def services_count(self) -> int:
        return len(self.services)

    @property
    def failed_count(self) -> int:
        return len(self.failed_services)

    def record_service(self, service: str) -> None:
        if service not in self.services:
            self.services.append(service)
