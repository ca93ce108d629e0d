from __future__ import annotations

class FakeMetrics:
    def __init__(self) -> None:
        self.calls: list[tuple[str, bool]] = []
    def record_validation(self, document_type, valid):
        self.calls.append((document_type.name, valid))

class StepClock:
    """Advances by `step` seconds on every reading."""
    def __init__(self, step: float = 0.5) -> None:
        self.step = step
        self.now = 0.0
    def elapsed(self) -> float:
        self.now += self.step
        return self.now
