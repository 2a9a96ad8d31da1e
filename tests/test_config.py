"""Tests for TweenConfig presets."""

import pytest

from tick_tweener import ArithmeticUnsupportedError, TweenConfig, Tweener, linear, vec_lerp
from tick_tweener.easing import ease_out
from tick_tweener.lerp import arithmetic_lerp


class TestTweenConfig:
    """Test strategy presets."""

    def test_defaults(self):
        """The default preset should use linear easing and arithmetic lerp."""
        config = TweenConfig()
        assert config.easing is linear
        assert config.lerp is arithmetic_lerp

    def test_frozen(self):
        """Presets should be immutable."""
        config = TweenConfig()
        with pytest.raises(AttributeError):
            config.easing = ease_out

    def test_unknown_easing_rejected_eagerly(self):
        """An unknown easing name should fail when the preset is created."""
        with pytest.raises(ValueError):
            TweenConfig(easing="wobble")

    def test_non_callable_lerp_rejected(self):
        """A non-callable lerp should fail when the preset is created."""
        with pytest.raises(TypeError):
            TweenConfig(lerp=42)

    def test_build_creates_configured_tweener(self):
        """build should produce a running tweener with the preset strategies."""
        config = TweenConfig(easing="ease_out")
        tweener = config.build(0.0, 8.0, 2.0)
        assert isinstance(tweener, Tweener)
        assert tweener.easing is ease_out
        assert tweener.running is True
        tweener.update(1.0)
        assert tweener.value == pytest.approx(6.0)

    def test_build_shares_preset_across_tweeners(self):
        """One preset should build independent tweeners."""
        config = TweenConfig(lerp=vec_lerp)
        a = config.build((0.0, 0.0), (1.0, 1.0), 1.0)
        b = config.build((5.0,), (6.0,), 2.0)
        a.update(1.0)
        assert a.value == (1.0, 1.0)
        assert b.value == (5.0,)
        assert b.elapsed == 0.0

    def test_build_validates_values(self):
        """build with the default lerp should reject non-arithmetic values."""
        with pytest.raises(ArithmeticUnsupportedError):
            TweenConfig().build("a", "b", 1.0)

    def test_build_validates_duration(self):
        """build should reject a non-positive duration."""
        with pytest.raises(ValueError):
            TweenConfig().build(0.0, 1.0, 0.0)
