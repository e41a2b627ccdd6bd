from __future__ import annotations

QUEUE_BASIC = """name: queue_basic
container:
  kind: queue
  maxsize: 0
steps:
  - op: enqueue
    items: [1, 2, three]
  - to_list
  - dequeue
  - op: enqueue
    items: [3]
  - print
  - peek
  - clear
  - op: enqueue
    items: [1, 2, 3, 4]
  - to_list
  - op: contains
    item: 5
  - op: contains
    item: 2
  - op: search
    item: 4
  - describe
  - print
"""

STACK_BASIC = """name: stack_basic
container:
  kind: stack
  maxsize: 0
steps:
  - op: push
    items: [1, 2, three, 4]
  - to_list
  - pop
  - op: push
    items: [3]
  - peek
  - clear
  - op: push
    items: [1, 2, 3, 4]
  - to_list
  - op: contains
    item: 5
  - op: contains
    item: 2
  - op: search
    item: 4
  - describe
  - print
"""

SAMPLES = {
    "queue": ("queue_basic.yaml", QUEUE_BASIC),
    "stack": ("stack_basic.yaml", STACK_BASIC),
}
