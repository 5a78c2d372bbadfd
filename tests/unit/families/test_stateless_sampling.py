from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from ranvar_core.exceptions import InvalidParametersError
from ranvar_core.settings import parameter_checks
from tests.unit.families.test_basic import TestBaseFamily
from tests.utils.mocks import SequenceRandomSource, take


class TestStatelessSampling(TestBaseFamily):
    def setup_method(self) -> None:
        self.family = self.make_interval_family()

    def test_draw(self) -> None:
        source = SequenceRandomSource([0.25])
        assert self.family.draw(source, low=0.0, high=4.0) == pytest.approx(1.0)
        assert source.remaining == 0

    def test_sample(self) -> None:
        sample = self.family.sample(3, SequenceRandomSource([0.0, 0.5, 0.75]), low=2.0, high=4.0)
        assert sample.shape == (3, 1)
        assert sample.array[:, 0].tolist() == pytest.approx([2.0, 3.0, 3.5])

    def test_samples_is_lazy_and_infinite(self) -> None:
        source = SequenceRandomSource([0.5] * 10)
        stream = self.family.samples(source, low=0.0, high=2.0)

        assert source.calls == 0
        assert take(stream, 10) == pytest.approx([1.0] * 10)

    def test_draw_validates(self) -> None:
        source = SequenceRandomSource([0.5])
        with pytest.raises(InvalidParametersError, match="low < high"):
            self.family.draw(source, low=1.0, high=0.0)
        assert source.calls == 0

    def test_samples_validates_before_first_pull(self) -> None:
        # The error surfaces on the call itself, not on the first next()
        with pytest.raises(InvalidParametersError):
            self.family.samples(SequenceRandomSource([]), low=1.0, high=0.0)

    def test_sample_validates(self) -> None:
        with pytest.raises(InvalidParametersError):
            self.family.sample(5, SequenceRandomSource([]), low=1.0, high=1.0)

    def test_validation_can_be_disabled(self) -> None:
        with parameter_checks(False):
            value = self.family.draw(SequenceRandomSource([0.5]), low=2.0, high=0.0)
        assert value == pytest.approx(1.0)

    def test_default_source_is_used(self) -> None:
        value = self.family.draw(low=0.0, high=1.0)
        assert 0.0 <= value < 1.0
