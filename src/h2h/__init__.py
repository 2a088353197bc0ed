"""
H2H package.

Contiene:
- tally: conteggio vittorie/sconfitte negli scontri diretti
- form: estrazione della forma (oggi / ultime 5)
- good_bet: euristica "good bet"
- aggregation: fetch H2H in parallelo e costruzione delle mappe per fixture
- board: righe pronte per la presentazione
"""
from .aggregation import AggregationError, AggregationResult, CycleResult, aggregate_h2h, run_cycle  # noqa: F401
from .form import FormMode, extract_form, render_form  # noqa: F401
from .good_bet import is_good_bet  # noqa: F401
from .tally import compute_tally  # noqa: F401


__all__ = [
    "AggregationError",
    "AggregationResult",
    "CycleResult",
    "aggregate_h2h",
    "run_cycle",
    "FormMode",
    "extract_form",
    "render_form",
    "is_good_bet",
    "compute_tally",
]
