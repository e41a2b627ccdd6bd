from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List
import time

@dataclass
class Metrics:
    counters: Dict[str, int] = field(default_factory=dict)
    depth_samples: List[int] = field(default_factory=list)
    started_ts: float = field(default_factory=time.time)
    finished_ts: float | None = None

    def inc(self, key: str, n: int = 1) -> None:
        self.counters[key] = self.counters.get(key, 0) + n

    def sample_depth(self, depth: int) -> None:
        self.depth_samples.append(depth)

    def finalize(self) -> None:
        self.finished_ts = time.time()

    def summary(self) -> dict:
        dur = (self.finished_ts or time.time()) - self.started_ts
        return {
            "duration_s": dur,
            "counters": self.counters,
            "depth": {
                "samples": len(self.depth_samples),
                "max": max(self.depth_samples) if self.depth_samples else 0,
                "final": self.depth_samples[-1] if self.depth_samples else 0,
            },
        }
