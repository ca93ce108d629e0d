from dataclasses import dataclass


@dataclass(frozen=True)
class BenchmarkResultDTO:
    document_type: str
    tested: int
    valid: int
    elapsed_seconds: float

    @property
    def checks_per_second(self) -> float:
        if self.elapsed_seconds <= 0:
            return float("inf")
        return self.tested / self.elapsed_seconds
