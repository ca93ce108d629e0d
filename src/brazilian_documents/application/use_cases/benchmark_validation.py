from __future__ import annotations

import logging
import random
import time
from typing import Protocol

from brazilian_documents.application.dtos.benchmark_result_dto import BenchmarkResultDTO
from brazilian_documents.domain.value_objects.cnpj import Cnpj
from brazilian_documents.domain.value_objects.cpf import Cpf
from brazilian_documents.domain.value_objects.document_type import DocumentType

logger = logging.getLogger(__name__)


class Clock(Protocol):
    def elapsed(self) -> float: ...


class PerfCounterClock:
    def elapsed(self) -> float:
        return time.perf_counter()


class BenchmarkValidationUseCase:
    """Times `is_valid` over random candidates; only the validation call is timed.

    Candidates are uniformly random, so roughly 1 in 100 is valid.
    """

    def __init__(self, rng: random.Random | None = None, clock: Clock | None = None) -> None:
        self.rng = rng or random.Random()
        self.clock = clock or PerfCounterClock()

    def execute(self, doc_type: DocumentType, count: int) -> BenchmarkResultDTO:
        if doc_type is DocumentType.CPF:
            candidates: list[int | str] = [self._cpf_candidate() for _ in range(count)]
            check = Cpf.is_valid
        elif doc_type is DocumentType.CNPJ:
            candidates = [self._cnpj_candidate() for _ in range(count)]
            check = Cnpj.is_valid
        else:
            raise ValueError("doc_type must be CPF or CNPJ")

        valid = 0
        elapsed = 0.0
        for candidate in candidates:
            start = self.clock.elapsed()
            ok = check(candidate)  # type: ignore[arg-type]
            elapsed += self.clock.elapsed() - start
            if ok:
                valid += 1

        result = BenchmarkResultDTO(doc_type.label, count, valid, elapsed)
        logger.info(
            "Benchmarked %d %s candidates: %d valid, %.1f checks/s",
            count,
            doc_type.label,
            valid,
            result.checks_per_second,
        )
        return result

    def _cpf_candidate(self) -> int:
        return self.rng.randrange(999_999_999) * 100 + self.rng.randrange(99)

    def _cnpj_candidate(self) -> str:
        root = self.rng.randrange(99_999_999)
        branch = self.rng.randrange(9_999)
        digits = self.rng.randrange(99)
        return f"{root:08d}{branch:04d}{digits:02d}"
