"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def chat_message() -> str:
    """A typical assistant reply (~600 characters)."""
    return """## Summary

Here is **what** changed in *this* release:

- faster `parse()` for long replies
- see [the docs](https://example.com/docs)
1. upgrade
2. restart

| Metric | Before | After |
|---|---|---|
| p50 | 12ms | 3ms |
| p99 | 80ms | 9ms |

```python
from chatmark import parse
doc = parse(reply)
```

> Benchmarks were run on a laptop.
---
Thanks!"""


@pytest.fixture
def long_conversation(chat_message: str) -> list[str]:
    """A history of 200 messages, half of them repeated."""
    return [chat_message + f"\n\nmessage {i % 100}" for i in range(200)]
