"""
Tests for Angle, approximate comparison and configuration.
"""

import json
import logging
import math

import pytest
import torch

from pga2d.pga.algebra import Vector, Bivector, Multivector, KVector
from pga2d.utils.angle import Angle, to_radians
from pga2d.utils.comparison import approx_eq, assert_approx_eq
from pga2d.utils.config import Config, load_config, save_config


class TestAngle:
    """Tests for the Angle helper."""

    def test_degrees_round_trip(self):
        """Degrees convert to radians and back."""
        angle = Angle.from_degrees(45.0)
        assert angle.radians == pytest.approx(math.pi / 4)
        assert angle.degrees == pytest.approx(45.0)

    def test_from_radians(self):
        """from_radians stores the value as is."""
        assert Angle.from_radians(1.5).radians == 1.5

    def test_addition(self):
        """Angles add."""
        total = Angle.from_degrees(30.0) + Angle.from_degrees(60.0)
        assert total.degrees == pytest.approx(90.0)
        assert (Angle(1.0) - Angle(0.25)).radians == 0.75
        assert (-Angle(1.0)).radians == -1.0

    def test_to_radians(self):
        """to_radians accepts Angle or float."""
        assert to_radians(Angle(2.0)) == 2.0
        assert to_radians(2.0) == 2.0


class TestComparison:
    """Tests for approximate equality."""

    def test_close_elements(self):
        """Elements within tolerance compare equal."""
        assert approx_eq(Vector(1.0, 2.0, 3.0), Vector(1.0, 2.0, 3.0 + 1e-9))
        assert not approx_eq(Vector(1.0, 2.0, 3.0), Vector(1.0, 2.0, 3.1))

    def test_tolerance_override(self):
        """atol loosens the comparison."""
        assert approx_eq(Bivector(1.0, 2.0, 3.0), Bivector(1.0, 2.0, 3.1), atol=0.2)

    def test_mixed_types(self):
        """Different grades compare as multivectors."""
        v = Vector(1.0, 2.0, 3.0)
        assert approx_eq(v, v.to_multivector())
        assert not approx_eq(v, Bivector(1.0, 2.0, 3.0))
        assert approx_eq(KVector.vector(v), v)

    def test_numbers(self):
        """Bare numbers and tensors compare too."""
        assert approx_eq(1.0, 1.0 + 1e-9)
        assert approx_eq(torch.tensor(2.0), 2.0)

    def test_config_tolerances(self):
        """A Config supplies tolerances."""
        loose = Config(atol=0.5)
        assert approx_eq(Multivector.from_scalar(1.0), Multivector.from_scalar(1.4), config=loose)
        assert not approx_eq(Multivector.from_scalar(1.0), Multivector.from_scalar(1.4))

    def test_assert_approx_eq(self):
        """assert_approx_eq raises with both operands."""
        assert_approx_eq(Vector(1.0), Vector(1.0))
        with pytest.raises(AssertionError, match="Elements differ"):
            assert_approx_eq(Vector(1.0), Vector(2.0))


class TestConfig:
    """Tests for configuration management."""

    def test_defaults(self):
        """Defaults come from core.constants."""
        config = Config()
        assert config.atol == 1e-6
        assert config.rtol == 1e-5
        assert config.ideal_eps == 0.0
        assert config.torch_dtype == torch.float64

    def test_validation(self):
        """Invalid values are rejected."""
        with pytest.raises(ValueError):
            Config(atol=-1.0)
        with pytest.raises(ValueError):
            Config(ideal_eps=-1e-3)
        with pytest.raises(ValueError, match="Unknown torch dtype"):
            Config(dtype="float128x")

    def test_from_dict_extra(self):
        """Unknown keys land in extra."""
        config = Config.from_dict({"atol": 1e-3, "label": "loose"})
        assert config.atol == 1e-3
        assert config.extra == {"label": "loose"}

    def test_update(self):
        """update returns a new config."""
        config = Config()
        updated = config.update(rtol=1e-2)
        assert updated.rtol == 1e-2
        assert config.rtol == 1e-5

    def test_save_load(self, tmp_path, caplog):
        """Config round-trips through JSON."""
        path = tmp_path / "nested" / "config.json"
        config = Config(atol=1e-4, dtype="float32", extra={"label": "test"})
        with caplog.at_level(logging.INFO, logger="pga2d.utils.config"):
            save_config(config, str(path))
            loaded = load_config(str(path))
        assert loaded == config
        assert json.loads(path.read_text())["dtype"] == "float32"
        assert any("Loaded config" in r.message for r in caplog.records)

    def test_dtype_used_for_comparison(self):
        """The config's dtype is used for tensors."""
        config = Config(dtype="float32")
        assert approx_eq(Vector(1.0, 2.0, 3.0), Vector(1.0, 2.0, 3.0), config=config)
