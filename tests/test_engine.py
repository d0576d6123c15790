"""Tests for the validated boundary operations."""

from decimal import Decimal

import pytest
from pydantic.alias_generators import to_snake

from retirement_engine.core.config import settings
from retirement_engine.engine import (
    compare_vehicles,
    compute_benefit_taxation,
    compute_heirs_tax,
    compute_posttax_scenario,
    compute_pretax_scenario,
    synthesize_comparison,
)
from retirement_engine.errors import ValidationError
from retirement_engine.models.inputs import FilingStatus, HeirsMode
from retirement_engine.serialization import to_payload


class TestComputePretaxScenario:
    """Tests for the pre-tax boundary operation."""

    def test_camel_case_payload(self, pretax_payload: dict) -> None:
        """A JSON-style payload validates and runs."""
        result = compute_pretax_scenario(pretax_payload)

        assert abs(result.balance_at_retirement - Decimal("819909.85")) < Decimal("0.01")
        assert abs(result.gross_income - Decimal("32796.39")) < Decimal("0.01")

    def test_snake_case_payload_and_mfj_alias(self, pretax_payload: dict) -> None:
        """snake_case keys and the short "mfj" status are accepted."""
        payload = {
            "annual_contribution": "20000",
            "years": 20,
            "current_tax_rate": "0.32",
            "growth_rate": "0.07",
            "distribution_mode": "swr",
            "swr_rate": "0.04",
            "retirement_tax_rate": "0.24",
            "annual_benefit": "30000",
            "filing_status": "mfj",
        }

        snake = compute_pretax_scenario(payload)
        camel = compute_pretax_scenario(pretax_payload)

        assert snake == camel

    def test_float_inputs_are_exact(self, pretax_payload: dict) -> None:
        """Float rates become their decimal literal, not binary approximations."""
        result = compute_pretax_scenario({**pretax_payload, "growthRate": 0, "years": 10})

        assert result.balance_at_retirement == Decimal("200000")
        assert result.front_end_savings_total == Decimal("64000")

    def test_defaults_applied(self, pretax_payload: dict) -> None:
        """Omitted optional fields fall back to configured defaults."""
        payload = {
            key: value
            for key, value in pretax_payload.items()
            if key not in ("swrRate", "filingStatus")
        }

        result = compute_pretax_scenario(payload)

        assert result.gross_income == result.balance_at_retirement * Decimal("0.04")

    @pytest.mark.parametrize(
        "field,value",
        [
            ("years", 0),
            ("years", 51),
            ("currentTaxRate", 1.5),
            ("retirementTaxRate", -0.1),
            ("growthRate", 0.75),
            ("swrRate", 0.25),
            ("annualContribution", 0),
            ("distributionMode", "annuity"),
            ("filingStatus", "head_of_household"),
        ],
    )
    def test_out_of_range_rejected(self, pretax_payload: dict, field: str, value: object) -> None:
        """Each out-of-bounds field is reported by name."""
        with pytest.raises(ValidationError) as exc_info:
            compute_pretax_scenario({**pretax_payload, field: value})

        assert [error.field for error in exc_info.value.errors] == [field]

    def test_all_errors_reported_together(self, pretax_payload: dict) -> None:
        """Every bad field is returned in one error."""
        payload = {**pretax_payload, "years": 0, "currentTaxRate": 2}
        del payload["annualBenefit"]

        with pytest.raises(ValidationError) as exc_info:
            compute_pretax_scenario(payload)

        fields = {error.field for error in exc_info.value.errors}
        assert fields == {"years", "currentTaxRate", "annualBenefit"}

    def test_unknown_field_rejected(self, pretax_payload: dict) -> None:
        """Typos are errors rather than silently ignored."""
        with pytest.raises(ValidationError) as exc_info:
            compute_pretax_scenario({**pretax_payload, "anualBenefit": 1})

        assert exc_info.value.errors[0].field == "anualBenefit"

    @pytest.mark.parametrize(
        "setting,value,field",
        [
            ("default_retirement_return", Decimal("-0.3"), "retirementReturn"),
            ("default_swr_rate", Decimal("0.5"), "swrRate"),
            ("default_fixed_years", 0, "fixedYears"),
        ],
    )
    def test_out_of_range_default_rejected(
        self, monkeypatch, pretax_payload: dict, setting: str, value: object, field: str
    ) -> None:
        """A default that slipped past settings validation is still bounded."""
        monkeypatch.setattr(settings, setting, value)
        payload = {
            key: item
            for key, item in pretax_payload.items()
            if key not in ("swrRate", "retirementReturn", "fixedYears")
        }

        with pytest.raises(ValidationError) as exc_info:
            compute_pretax_scenario({**payload, "distributionMode": "interest"})

        fields = {error.field for error in exc_info.value.errors}
        assert fields & {field, to_snake(field)}

    def test_non_mapping_rejected(self) -> None:
        """A payload that is not an object fails at the root."""
        with pytest.raises(ValidationError) as exc_info:
            compute_pretax_scenario([1, 2, 3])  # type: ignore[arg-type]

        assert exc_info.value.errors[0].field == "__root__"

    def test_error_payload_shape(self, pretax_payload: dict) -> None:
        """Errors convert to a transport-ready body."""
        with pytest.raises(ValidationError) as exc_info:
            compute_pretax_scenario({**pretax_payload, "years": 0})

        payload = exc_info.value.to_payload()
        assert payload["error"] == "Invalid input"
        assert payload["details"][0]["field"] == "years"
        assert payload["details"][0]["message"]


class TestComputePosttaxScenario:
    """Tests for the after-tax boundary operation."""

    def test_runs(self) -> None:
        """A minimal payload validates and yields zero tax."""
        result = compute_posttax_scenario(
            {
                "annualContributionAfterTax": 13600,
                "years": 20,
                "growthRate": 0.07,
                "distributionMode": "swr",
                "annualBenefit": 30000,
            }
        )

        assert result.total_annual_tax == Decimal("0")
        assert result.net_income == result.annual_tax_free_income + Decimal("30000")

    def test_tax_fields_not_accepted(self) -> None:
        """The after-tax request has no tax rate to supply."""
        with pytest.raises(ValidationError) as exc_info:
            compute_posttax_scenario(
                {
                    "annualContributionAfterTax": 13600,
                    "years": 20,
                    "growthRate": 0.07,
                    "distributionMode": "swr",
                    "retirementTaxRate": 0.24,
                }
            )

        assert exc_info.value.errors[0].field == "retirementTaxRate"


class TestComputeBenefitTaxation:
    """Tests for the standalone benefit taxation operation."""

    def test_single_over_upper_threshold(self) -> None:
        """Taxable benefit capped at 85% and taxed at the flat rate."""
        result = compute_benefit_taxation(
            {"benefit": 20000, "otherIncome": 40000, "filingStatus": "single", "taxRate": 0.22}
        )

        assert result.filing_status == FilingStatus.SINGLE
        assert result.provisional_income == Decimal("50000")
        assert result.taxable_benefit == Decimal("17000")
        assert result.tax_due == Decimal("3740")
        assert result.taxability_percent == Decimal("85")
        assert result.thresholds.base == Decimal("25000")
        assert result.thresholds.upper == Decimal("34000")

    def test_defaults_to_joint(self) -> None:
        """Filing status defaults to married filing jointly."""
        result = compute_benefit_taxation({"benefit": 20000, "otherIncome": 0, "taxRate": 0.22})

        assert result.filing_status == FilingStatus.MARRIED_JOINT
        assert result.thresholds.base == Decimal("32000")
        assert result.tax_due == Decimal("0")


class TestComputeHeirsTax:
    """Tests for the heirs boundary operation."""

    def test_modes_match(self) -> None:
        """$500k at 22% owes $110k under either schedule."""
        lump = compute_heirs_tax({"pretaxBalance": 500000, "beneficiaryTaxRate": 0.22, "mode": "lump"})
        ten_year = compute_heirs_tax(
            {"pretaxBalance": 500000, "beneficiaryTaxRate": 0.22, "mode": "ten_year"}
        )

        assert lump.tax_due == Decimal("110000")
        assert ten_year.tax_due == Decimal("110000")
        assert ten_year.annual_tax_ten_year == Decimal("11000")

    def test_negative_balance_rejected(self) -> None:
        """Balances cannot be negative."""
        with pytest.raises(ValidationError) as exc_info:
            compute_heirs_tax({"pretaxBalance": -1, "beneficiaryTaxRate": 0.22})

        assert exc_info.value.errors[0].field == "pretaxBalance"


class TestSynthesizeComparison:
    """Tests for synthesis from serialized results."""

    def test_accepts_json_payloads(self, pretax_payload: dict) -> None:
        """Results round-tripped through JSON synthesize the same comparison."""
        pretax = compute_pretax_scenario(pretax_payload)
        posttax = compute_posttax_scenario(
            {
                "annualContributionAfterTax": 13600,
                "years": 20,
                "growthRate": 0.07,
                "distributionMode": "swr",
                "annualBenefit": 30000,
            }
        )

        direct = synthesize_comparison(pretax, posttax, pretax_payload)
        from_payloads = synthesize_comparison(
            to_payload(pretax), to_payload(posttax), pretax_payload
        )

        assert from_payloads == direct


class TestCompareVehicles:
    """Tests for the end-to-end comparison."""

    def test_with_heirs(self, pretax_payload: dict) -> None:
        """Heirs tax on the pre-tax balance only."""
        result = compare_vehicles(
            pretax_payload,
            {
                "annualContributionAfterTax": 13600,
                "years": 20,
                "growthRate": 0.07,
                "distributionMode": "swr",
                "annualBenefit": 30000,
            },
            beneficiary_tax_rate=0.22,
            heirs_mode=HeirsMode.TEN_YEAR,
        )

        balance = compute_pretax_scenario(pretax_payload).balance_at_retirement
        assert result.kpis["heirs_tax_pretax"] == balance * Decimal("0.22")
        assert result.kpis["heirs_tax_posttax"] == Decimal("0")
        assert len(result.narrative) == 9

    def test_invalid_posttax_blocks_everything(self, pretax_payload: dict) -> None:
        """Validation runs for both payloads before any scenario math."""
        with pytest.raises(ValidationError) as exc_info:
            compare_vehicles(pretax_payload, {"years": 20})

        fields = {error.field for error in exc_info.value.errors}
        assert "annualContributionAfterTax" in fields

    def test_invalid_beneficiary_rate(self, pretax_payload: dict) -> None:
        """A beneficiary rate above 100% is rejected up front."""
        with pytest.raises(ValidationError) as exc_info:
            compare_vehicles(
                pretax_payload,
                {
                    "annualContributionAfterTax": 13600,
                    "years": 20,
                    "growthRate": 0.07,
                    "distributionMode": "swr",
                },
                beneficiary_tax_rate=1.5,
            )

        assert exc_info.value.errors[0].field == "beneficiaryTaxRate"
