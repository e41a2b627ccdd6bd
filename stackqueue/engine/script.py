from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TextIO
import io
import logging
import sys

import yaml

from .container import BoundedContainer
from .errors import ContainerError
from .metrics import Metrics
from .queue import BoundedQueue
from .stack import BoundedStack

logger = logging.getLogger(__name__)

KINDS = {"queue": BoundedQueue, "stack": BoundedStack}

COMMON_OPS = {"peek", "size", "clear", "contains", "is_empty", "search", "to_list", "describe", "print"}
KIND_OPS = {
    "queue": {"enqueue", "dequeue"},
    "stack": {"push", "pop"},
}
NEEDS_ITEMS = {"enqueue", "push"}
NEEDS_ITEM = {"contains", "search"}

@dataclass
class Step:
    op: str
    args: Dict[str, Any] = field(default_factory=dict)

@dataclass
class Script:
    name: str
    kind: str
    maxsize: int
    steps: List[Step]
    strict: bool = False

@dataclass
class RunResult:
    name: str
    outputs: List[str]
    metrics: Dict[str, Any]
    final_contents: List[Any]

def parse_script(cfg: Dict[str, Any]) -> Script:
    if not isinstance(cfg, dict):
        raise ValueError("Script must be a mapping")
    name = cfg.get("name", "script")

    c_cfg = cfg.get("container", {}) or {}
    kind = c_cfg.get("kind", "queue")
    if kind not in KINDS:
        raise ValueError(f"Unknown container kind: {kind}")
    maxsize = int(c_cfg.get("maxsize", 0))

    step_cfgs = cfg.get("steps")
    if not isinstance(step_cfgs, list):
        raise ValueError("Script needs a 'steps' list")

    allowed = COMMON_OPS | KIND_OPS[kind]
    steps = []
    for i, s in enumerate(step_cfgs):
        if isinstance(s, str):
            s = {"op": s}
        if not isinstance(s, dict):
            raise ValueError(f"Step {i}: expected an op name or mapping")
        op = s.get("op")
        if op not in allowed:
            raise ValueError(f"Step {i}: unknown op {op!r} for a {kind}")
        args = {k: v for k, v in s.items() if k != "op"}
        if op in NEEDS_ITEMS and not isinstance(args.get("items"), list):
            raise ValueError(f"Step {i}: {op} needs an 'items' list")
        if op in NEEDS_ITEM and "item" not in args:
            raise ValueError(f"Step {i}: {op} needs an 'item'")
        steps.append(Step(op=op, args=args))

    return Script(name=name, kind=kind, maxsize=maxsize, steps=steps, strict=bool(cfg.get("strict", False)))

def load_script(path: str) -> Script:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    return parse_script(cfg)

def build_container(script: Script) -> BoundedContainer:
    return KINDS[script.kind](name=script.name, maxsize=script.maxsize)

class ScriptRunner:
    """
    Replays a Script against a fresh container, printing one line per step.
    Container errors are counted and printed; with strict they propagate.
    """
    def __init__(self, script: Script, *, out: Optional[TextIO] = None, strict: bool | None = None):
        self.script = script
        self.out = out or sys.stdout
        self.strict = script.strict if strict is None else strict
        self.container = build_container(script)

    def apply(self, step: Step) -> str:
        """Run one step and return the line it reports."""
        c = self.container
        op = step.op
        if op in NEEDS_ITEMS:
            getattr(c, op)(step.args["items"])
            return f"{op}: ok"
        if op in NEEDS_ITEM:
            return f"{op}: {getattr(c, op)(step.args['item'])}"
        if op == "clear":
            c.clear()
            return f"{op}: ok"
        if op == "print":
            buf = io.StringIO()
            c.show(file=buf)
            return buf.getvalue().rstrip("\n")
        if op == "to_list":
            return f"{op}: {c.to_list()!r}"
        return f"{op}: {getattr(c, op)()}"

    def run(self) -> RunResult:
        metrics = Metrics()
        outputs: List[str] = []
        key = self.script.name

        for step in self.script.steps:
            try:
                line = self.apply(step)
                metrics.inc(f"{key}.{step.op}", 1)
            except ContainerError as e:
                metrics.inc(f"{key}.errors", 1)
                logger.debug("%s: step %s failed: %s", key, step.op, e)
                if self.strict:
                    raise
                line = f"{step.op}: error: {e}"
            finally:
                metrics.sample_depth(self.container.size())

            outputs.append(line)
            print(line, file=self.out)

        metrics.finalize()
        return RunResult(
            name=self.script.name,
            outputs=outputs,
            metrics=metrics.summary(),
            final_contents=self.container.to_list(),
        )
