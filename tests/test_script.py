import io

import pytest
import yaml

from stackqueue.engine.errors import CapacityExceeded
from stackqueue.engine.queue import BoundedQueue
from stackqueue.engine.script import ScriptRunner, build_container, load_script, parse_script
from stackqueue.engine.stack import BoundedStack
from stackqueue.samples import QUEUE_BASIC, STACK_BASIC


def run_yaml(text, **kwargs):
    out = io.StringIO()
    result = ScriptRunner(parse_script(yaml.safe_load(text)), out=out, **kwargs).run()
    return result, out.getvalue()


def test_queue_sample_output():
    result, printed = run_yaml(QUEUE_BASIC)
    assert result.outputs == [
        "enqueue: ok",
        "to_list: [1, 2, 'three']",
        "dequeue: 1",
        "enqueue: ok",
        "Queue content: 2, three, 3",
        "peek: 2",
        "clear: ok",
        "enqueue: ok",
        "to_list: [1, 2, 3, 4]",
        "contains: False",
        "contains: True",
        "search: 4",
        "describe: 1, 2, 3, 4",
        "Queue content: 1, 2, 3, 4",
    ]
    assert printed.splitlines() == result.outputs
    assert result.final_contents == [1, 2, 3, 4]


def test_stack_sample_output():
    result, _ = run_yaml(STACK_BASIC)
    assert result.outputs[:5] == [
        "push: ok",
        "to_list: [1, 2, 'three', 4]",
        "pop: 4",
        "push: ok",
        "peek: 3",
    ]
    assert result.outputs[-1] == "Stack content: 1, 2, 3, 4"
    assert result.metrics["counters"]["stack_basic.push"] == 3


def test_errors_recorded_when_not_strict():
    text = """
name: tiny
container: {kind: stack, maxsize: 1}
steps:
  - pop
  - {op: push, items: [1, 2]}
  - {op: search, item: 9}
  - size
"""
    result, _ = run_yaml(text)
    assert result.outputs == [
        "pop: error: Empty Stack",
        "push: error: Stack has reached max capacity",
        "search: error: Item not found in stack.",
        "size: 0",
    ]
    assert result.metrics["counters"] == {"tiny.errors": 3, "tiny.size": 1}
    assert result.metrics["depth"] == {"samples": 4, "max": 0, "final": 0}


def test_strict_propagates():
    text = """
container: {kind: queue, maxsize: 1}
strict: true
steps:
  - {op: enqueue, items: [1, 2]}
"""
    with pytest.raises(CapacityExceeded):
        run_yaml(text)


def test_strict_override():
    text = """
container: {kind: queue}
steps:
  - dequeue
"""
    result, _ = run_yaml(text)
    assert result.outputs == ["dequeue: error: Empty queue."]
    with pytest.raises(IndexError):
        run_yaml(text, strict=True)


def test_peek_and_is_empty_on_empty_queue():
    result, _ = run_yaml("steps: [peek, is_empty]")
    assert result.name == "script"
    assert result.outputs == ["peek: None", "is_empty: True"]


@pytest.mark.parametrize(
    "cfg, message",
    [
        ({"container": {"kind": "heap"}, "steps": []}, "Unknown container kind"),
        ({"container": {"kind": "queue"}}, "steps"),
        ({"container": {"kind": "queue"}, "steps": ["pop"]}, "unknown op 'pop'"),
        ({"container": {"kind": "stack"}, "steps": ["dequeue"]}, "unknown op 'dequeue'"),
        ({"steps": [{"op": "enqueue", "items": 3}]}, "needs an 'items' list"),
        ({"steps": [{"op": "search"}]}, "needs an 'item'"),
        (["not", "a", "mapping"], "mapping"),
    ],
)
def test_parse_rejects_bad_scripts(cfg, message):
    with pytest.raises(ValueError, match=message):
        parse_script(cfg)


def test_load_script_from_file(tmp_path):
    path = tmp_path / "s.yaml"
    path.write_text(STACK_BASIC, encoding="utf-8")
    script = load_script(str(path))
    assert script.name == "stack_basic"
    assert script.kind == "stack"
    assert script.maxsize == 0
    assert not script.strict


def test_build_container_kinds():
    q = build_container(parse_script({"name": "a", "container": {"kind": "queue", "maxsize": 3}, "steps": []}))
    s = build_container(parse_script({"name": "b", "container": {"kind": "stack"}, "steps": []}))
    assert isinstance(q, BoundedQueue) and q.maxsize == 3 and q.name == "a"
    assert isinstance(s, BoundedStack) and s.maxsize == 0
