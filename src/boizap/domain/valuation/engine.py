"""
Valuation engine.

Turns batch parameters and a resolved quote into the physical and financial
summary of a batch. Pure arithmetic with no validation: out-of-range inputs
(e.g. yield above 100 %) propagate into the result instead of raising.
"""
from dataclasses import dataclass
from typing import Union

from ..livestock.batch import BatchParameters, BatchSnapshot
from ..market.quote import Quote


@dataclass(frozen=True)
class ResultSummary:
    """Frozen outcome of one valuation"""
    total_initial_weight_kg: float
    total_final_weight_kg: float
    total_carcass_weight_kg: float
    total_units: float               # Carcass weight in the quote's unit
    total_value: float
    weight_gain_kg: float
    final_weight_per_animal_kg: float
    quote: Quote
    batch: BatchSnapshot


def final_weight_per_animal(initial_weight_kg: float, daily_gain_kg: float, period_days: float) -> float:
    """Live weight of one animal at the end of the period"""
    return initial_weight_kg + daily_gain_kg * period_days


def compute_valuation(params: Union[BatchParameters, BatchSnapshot], quote: Quote) -> ResultSummary:
    """
    Compute the valuation of a batch.

    Args:
        params: Batch parameters in effect at call time (not mutated)
        quote: Resolved market quote

    Returns:
        ResultSummary with the batch captured by value
    """
    per_animal = final_weight_per_animal(
        params.initial_weight_kg, params.daily_gain_kg, params.period_days
    )

    total_initial = params.batch_size * params.initial_weight_kg
    total_final = params.batch_size * per_animal
    weight_gain = total_final - total_initial

    total_carcass = total_final * (params.carcass_yield_percent / 100)
    total_units = quote.unit.from_kilograms(total_carcass)
    total_value = total_units * quote.price

    return ResultSummary(
        total_initial_weight_kg=total_initial,
        total_final_weight_kg=total_final,
        total_carcass_weight_kg=total_carcass,
        total_units=total_units,
        total_value=total_value,
        weight_gain_kg=weight_gain,
        final_weight_per_animal_kg=per_animal,
        quote=quote,
        batch=params.snapshot(),
    )
