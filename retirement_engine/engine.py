"""Boundary operations for the retirement comparison engine.

Each operation validates its payload before any arithmetic runs and returns a
frozen, JSON-serializable result model. Payloads may be model instances or
plain mappings in snake_case or camelCase, so any transport can wrap these
functions unchanged.

Example:
    >>> from retirement_engine.engine import compute_heirs_tax
    >>> result = compute_heirs_tax(
    ...     {"pretaxBalance": 500000, "beneficiaryTaxRate": 0.22, "mode": "10yr"}
    ... )
    >>> result.tax_due
    Decimal('110000.00')
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, TypeVar

import pydantic

from retirement_engine.comparison.synthesizer import synthesize_comparison as _synthesize
from retirement_engine.core.logging import get_logger, scenario_id_ctx
from retirement_engine.errors import FieldError, ValidationError
from retirement_engine.models.inputs import (
    BenefitTaxationInputs,
    HeirsInputs,
    HeirsMode,
    ScenarioInputsPosttax,
    ScenarioInputsPretax,
)
from retirement_engine.models.results import (
    BenefitTaxationResult,
    ComparisonResult,
    HeirsResult,
    ScenarioResultPosttax,
    ScenarioResultPretax,
    ThresholdPair,
)
from retirement_engine.scenarios.posttax import run_posttax_scenario
from retirement_engine.scenarios.pretax import run_pretax_scenario
from retirement_engine.tax.heirs import calculate_heirs_tax
from retirement_engine.tax.provisional_income import calculate_benefit_taxation

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


def parse_payload(model: type[ModelT], payload: ModelT | Mapping[str, Any], operation: str) -> ModelT:
    """Validate a payload into a model, failing fast with every bad field.

    Args:
        model: Pydantic model to validate against.
        payload: Model instance (returned as-is) or mapping.
        operation: Operation name for log correlation.

    Returns:
        Validated model instance.

    Raises:
        ValidationError: If the payload is not a mapping or any field is invalid.
    """
    if isinstance(payload, model):
        return payload

    if not isinstance(payload, Mapping):
        error = ValidationError(
            [FieldError("__root__", f"Expected an object, got {type(payload).__name__}")]
        )
        logger.warning("input_validation_failed", operation=operation, fields=["__root__"])
        raise error

    try:
        return model.model_validate(dict(payload))
    except pydantic.ValidationError as exc:
        error = ValidationError.from_pydantic(exc)
        logger.warning(
            "input_validation_failed",
            operation=operation,
            fields=[e.field for e in error.errors],
        )
        raise error from exc


def compute_pretax_scenario(
    payload: ScenarioInputsPretax | Mapping[str, Any],
) -> ScenarioResultPretax:
    """Validate and run the pre-tax vehicle scenario."""
    inputs = parse_payload(ScenarioInputsPretax, payload, "compute_pretax_scenario")
    return run_pretax_scenario(inputs)


def compute_posttax_scenario(
    payload: ScenarioInputsPosttax | Mapping[str, Any],
) -> ScenarioResultPosttax:
    """Validate and run the after-tax vehicle scenario."""
    inputs = parse_payload(ScenarioInputsPosttax, payload, "compute_posttax_scenario")
    return run_posttax_scenario(inputs)


def compute_benefit_taxation(
    payload: BenefitTaxationInputs | Mapping[str, Any],
) -> BenefitTaxationResult:
    """Validate and compute Social Security taxation for one year.

    The taxable benefit is taxed at the request's flat ``tax_rate``.
    """
    inputs = parse_payload(BenefitTaxationInputs, payload, "compute_benefit_taxation")
    taxation = calculate_benefit_taxation(
        inputs.benefit, inputs.other_income, inputs.filing_status
    )
    result = BenefitTaxationResult(
        filing_status=inputs.filing_status,
        provisional_income=taxation.provisional_income,
        taxable_benefit=taxation.taxable_benefit,
        tax_due=taxation.taxable_benefit * inputs.tax_rate,
        taxability_percent=taxation.taxability_percent,
        thresholds=ThresholdPair(
            base=taxation.thresholds.base, upper=taxation.thresholds.upper
        ),
    )
    logger.info(
        "benefit_taxation_computed",
        filing_status=inputs.filing_status.value,
        provisional_income=result.provisional_income,
        taxable_benefit=result.taxable_benefit,
    )
    return result


def compute_heirs_tax(payload: HeirsInputs | Mapping[str, Any]) -> HeirsResult:
    """Validate and compute the tax on an inherited pre-tax balance."""
    inputs = parse_payload(HeirsInputs, payload, "compute_heirs_tax")
    result = calculate_heirs_tax(inputs)
    logger.info("heirs_tax_computed", mode=inputs.mode.value, tax_due=result.tax_due)
    return result


def synthesize_comparison(
    pretax_result: ScenarioResultPretax | Mapping[str, Any],
    posttax_result: ScenarioResultPosttax | Mapping[str, Any],
    pretax_inputs: ScenarioInputsPretax | Mapping[str, Any],
    heirs_pretax: HeirsResult | Mapping[str, Any] | None = None,
    heirs_posttax: HeirsResult | Mapping[str, Any] | None = None,
) -> ComparisonResult:
    """Validate prior results and merge them into a comparison.

    Accepts results produced by this engine, or their JSON payloads.
    """
    operation = "synthesize_comparison"
    return _synthesize(
        parse_payload(ScenarioResultPretax, pretax_result, operation),
        parse_payload(ScenarioResultPosttax, posttax_result, operation),
        parse_payload(ScenarioInputsPretax, pretax_inputs, operation),
        heirs_pretax=(
            parse_payload(HeirsResult, heirs_pretax, operation)
            if heirs_pretax is not None
            else None
        ),
        heirs_posttax=(
            parse_payload(HeirsResult, heirs_posttax, operation)
            if heirs_posttax is not None
            else None
        ),
    )


def compare_vehicles(
    pretax_payload: ScenarioInputsPretax | Mapping[str, Any],
    posttax_payload: ScenarioInputsPosttax | Mapping[str, Any],
    beneficiary_tax_rate: Decimal | float | None = None,
    heirs_mode: HeirsMode | str = HeirsMode.LUMP,
) -> ComparisonResult:
    """Run both scenarios, optional heirs analysis, and the synthesis.

    Both payloads are validated before either scenario runs. When a
    beneficiary rate is given, heirs tax is computed on the pre-tax balance;
    the after-tax balance passes to heirs untaxed.

    Args:
        pretax_payload: Pre-tax request.
        posttax_payload: After-tax request.
        beneficiary_tax_rate: Beneficiary's marginal rate, or None to skip
            the heirs analysis.
        heirs_mode: Payout schedule for the inherited pre-tax balance.

    Returns:
        ComparisonResult.

    Raises:
        ValidationError: If any payload is invalid.
    """
    operation = "compare_vehicles"
    pretax_inputs = parse_payload(ScenarioInputsPretax, pretax_payload, operation)
    posttax_inputs = parse_payload(ScenarioInputsPosttax, posttax_payload, operation)
    if beneficiary_tax_rate is not None:
        # Balance is unknown until the scenario runs; validate the rate and mode now
        heirs_request = parse_payload(
            HeirsInputs,
            {
                "pretaxBalance": Decimal("0"),
                "beneficiaryTaxRate": beneficiary_tax_rate,
                "mode": heirs_mode,
            },
            operation,
        )

    token = scenario_id_ctx.set(uuid.uuid4().hex)
    try:
        pretax_result = run_pretax_scenario(pretax_inputs)
        posttax_result = run_posttax_scenario(posttax_inputs)

        heirs_pretax = heirs_posttax = None
        if beneficiary_tax_rate is not None:
            heirs_pretax = calculate_heirs_tax(
                heirs_request.model_copy(
                    update={"pretax_balance": pretax_result.balance_at_retirement}
                )
            )
            heirs_posttax = calculate_heirs_tax(
                heirs_request.model_copy(
                    update={
                        "pretax_balance": posttax_result.balance_at_retirement,
                        "beneficiary_tax_rate": Decimal("0"),
                    }
                )
            )

        return _synthesize(
            pretax_result,
            posttax_result,
            pretax_inputs,
            heirs_pretax=heirs_pretax,
            heirs_posttax=heirs_posttax,
        )
    finally:
        scenario_id_ctx.reset(token)
