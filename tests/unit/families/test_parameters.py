from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
from typing import Any

import pytest

from ranvar_core.exceptions import InvalidParametersError
from ranvar_core.families import (
    ParametricFamily,
    Parametrization,
    ParametrizationConstraint,
    constraint,
)
from ranvar_core.settings import parameter_checks
from ranvar_core.types import UnivariateContinuous
from tests.unit.families.test_basic import TestBaseFamily


class TestParametrizationAPI(TestBaseFamily):
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", False) is True
        assert getattr(check_positive, "__constraint_description", None) == "Value must be positive"

    def test_free_function_parametrization_decorator(self) -> None:
        family = ParametricFamily(
            name="FreeDecoratorFamily",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["kind"],
            distr_characteristics={},
        )

        @family.parametrization(name="kind")
        class Kind(Parametrization):
            value: float

        obj = Kind(value=1.25)  # type: ignore[call-arg]
        assert obj.name == "kind"
        assert obj.parameters == {"value": 1.25}
        assert obj.constraints == []
        assert getattr(Kind, "__family__", None) is family
        assert getattr(Kind, "__param_name__", None) == "kind"
        assert hasattr(Kind, "__dataclass_fields__")
        assert family.base is Kind

    def test_parametrizations_are_frozen(self) -> None:
        family = self.make_default_family()
        params = family.parameters(value=1.0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            params.value = 2.0  # type: ignore[misc]

    def test_constraints_are_collected_in_order(self) -> None:
        family = ParametricFamily(
            name="Ordered",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["p"],
            distr_characteristics={},
        )

        @family.parametrization(name="p")
        class P(Parametrization):
            a: float
            b: float

            @constraint(description="a > 0")
            def first(self) -> bool:
                return self.a > 0

            @constraint(description="b > a")
            def second(self) -> bool:
                return self.b > self.a

        assert [c.description for c in P._constraints] == ["a > 0", "b > a"]

        # The first violated constraint is the one reported
        with pytest.raises(InvalidParametersError, match='"a > 0"'):
            P(a=-1.0, b=-2.0).validate()  # type: ignore[call-arg]
        with pytest.raises(InvalidParametersError, match='"b > a"'):
            P(a=1.0, b=0.5).validate()  # type: ignore[call-arg]

    def test_static_constraint_is_rejected(self) -> None:
        family = ParametricFamily(
            name="Broken",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["p"],
            distr_characteristics={},
        )

        with pytest.raises(TypeError, match="must be an instance method"):

            @family.parametrization(name="p")
            class P(Parametrization):
                value: float

                @staticmethod
                @constraint(description="never")
                def check() -> bool:
                    return False

    # ---------- Validation ----------

    def test_validate_and_is_valid(self) -> None:
        family = self.make_default_family()
        Base = family.parametrizations["base"]

        good = Base(value=1.0)  # type: ignore[call-arg]
        bad = Base(value=-1.0)  # type: ignore[call-arg]

        assert good.is_valid()
        good.validate()
        assert not bad.is_valid()
        with pytest.raises(InvalidParametersError) as exc_info:
            bad.validate()
        assert exc_info.value.description == "value > 0"
        assert exc_info.value.parametrization_name == "base"
        assert isinstance(exc_info.value, ValueError)

    def test_family_parameters_validates_jointly(self) -> None:
        family = self.make_interval_family()

        assert family.parameters(low=0.0, high=1.0).parameters == {"low": 0.0, "high": 1.0}
        with pytest.raises(InvalidParametersError, match="low < high"):
            family.parameters(low=2.0, high=1.0)

    def test_family_parameters_skip_validation_when_disabled(self) -> None:
        family = self.make_interval_family()

        with parameter_checks(False):
            params = family.parameters(low=2.0, high=1.0)
        assert not params.is_valid()

    def test_family_parameters_unknown_parametrization(self) -> None:
        family = self.make_default_family()
        with pytest.raises(KeyError):
            family.parameters("missing", value=1.0)

    def test_family_parameters_missing_field(self) -> None:
        family = self.make_interval_family()
        with pytest.raises(TypeError):
            family.parameters(low=1.0)

    # ---------- Replacement ----------

    def test_replace_builds_new_unvalidated_tuple(self) -> None:
        family = self.make_interval_family()
        params = family.parameters(low=0.0, high=1.0)

        candidate = params.replace(low=5.0)
        assert candidate is not params
        assert candidate.parameters == {"low": 5.0, "high": 1.0}
        assert params.parameters == {"low": 0.0, "high": 1.0}
        assert not candidate.is_valid()

    def test_replace_rejects_unknown_names(self) -> None:
        family = self.make_interval_family()
        params = family.parameters(low=0.0, high=1.0)

        with pytest.raises(TypeError, match="Unknown parameter"):
            params.replace(middle=0.5)

    # ---------- Family-level conversion to base ----------

    def test_get_base_parameters_uses_family_logic(self) -> None:
        family = self.make_default_family()

        BaseCls = family.parametrizations["base"]
        AltCls = family.parametrizations["alt"]

        base_params = BaseCls(value=5.0)  # type: ignore[call-arg]
        assert family.to_base(base_params) is base_params

        alt_params = AltCls(value=-3.0)  # type: ignore[call-arg]
        base_from_alt = family.to_base(alt_params)
        assert isinstance(base_from_alt, BaseCls)
        assert base_from_alt.value == 3.0  # type: ignore[attr-defined]
