from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class GeneratorState:
    depth: int = 1
    trace: List[str] = field(default_factory=list)
    is_tracing: bool = False

    def reset(self) -> None:
        # Generated statements start inside the block the preface opens.
        self.depth = 1
        self.trace.clear()

    def add_trace(self, message: str) -> None:
        if self.is_tracing:
            self.trace.append(message)
