from __future__ import annotations
import argparse
import logging
import os
import yaml

from stackqueue.engine.errors import ContainerError
from stackqueue.engine.script import RunResult, ScriptRunner, load_script, parse_script
from stackqueue.samples import SAMPLES

EXAMPLES_DIR = "container_examples"

def print_summary(result: RunResult) -> None:
    m = result.metrics
    print(f"Script:   {result.name}")
    print(f"Duration: {m['duration_s']:.3f}s")
    print("Counters:")
    for k, v in sorted(m["counters"].items()):
        print(f"  {k}: {v}")
    print("Depth:", m["depth"])
    print("Final contents:", result.final_contents)

def cmd_init() -> None:
    os.makedirs(EXAMPLES_DIR, exist_ok=True)
    for filename, body in SAMPLES.values():
        out = os.path.join(EXAMPLES_DIR, filename)
        if not os.path.exists(out):
            with open(out, "w", encoding="utf-8") as f:
                f.write(body)
        print(f"Wrote {out}")

def cmd_run(script_path: str, strict: bool) -> int:
    script = load_script(script_path)
    try:
        result = ScriptRunner(script, strict=strict or None).run()
    except ContainerError as e:
        print(f"Script {script.name} failed: {e}")
        return 1
    print_summary(result)
    return 0

def cmd_demo(kind: str | None) -> None:
    kinds = [kind] if kind else list(SAMPLES)
    for k in kinds:
        _, body = SAMPLES[k]
        script = parse_script(yaml.safe_load(body))
        print(f"== {script.name}")
        ScriptRunner(script).run()

def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="stackqueue")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    sub.add_parser("init")

    runp = sub.add_parser("run")
    runp.add_argument("script", help="YAML script path")
    runp.add_argument("--strict", action="store_true", help="Stop on the first container error")

    demo = sub.add_parser("demo")
    demo.add_argument("kind", nargs="?", choices=sorted(SAMPLES), help="Run only one sample")

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "init":
        cmd_init()
    elif args.cmd == "run":
        return cmd_run(args.script, args.strict)
    elif args.cmd == "demo":
        cmd_demo(args.kind)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
