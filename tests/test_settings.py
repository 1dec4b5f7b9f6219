"""Tests for SettingsManager."""
import pytest

from core.settings import DEFAULT_SETTINGS, SettingsManager


def test_settings_manager_initialization(settings_manager):
    """Defaults are written on construction."""
    for key in DEFAULT_SETTINGS:
        assert settings_manager.contains(key)


def test_get_set_setting(settings_manager):
    settings_manager.set("test.key", "test value")
    assert settings_manager.get("test.key") == "test value"


def test_get_missing_key_returns_default(settings_manager):
    assert settings_manager.get("missing.key", 42) == 42


def test_animation_defaults(settings_manager):
    assert settings_manager.get_float('animation.duration') == pytest.approx(0.2)
    assert settings_manager.get_int('animation.fps') == 60
    assert settings_manager.get('animation.easing') == 'quad_out'


def test_change_handler_receives_new_and_old(settings_manager):
    calls = []
    settings_manager.on_changed('animation.duration', lambda new, old: calls.append((new, old)))

    settings_manager.set('animation.duration', 0.5)

    assert len(calls) == 1
    new, old = calls[0]
    assert new == 0.5
    assert SettingsManager.to_float(old) == pytest.approx(0.2)


def test_settings_changed_signal(qtbot, settings_manager):
    with qtbot.waitSignal(settings_manager.settings_changed, timeout=1000) as blocker:
        settings_manager.set('animation.fps', 120)
    assert blocker.args == ['animation.fps', 120]


def test_failing_handler_does_not_block_others(settings_manager):
    seen = []

    def broken(_new, _old):
        raise RuntimeError("boom")

    settings_manager.on_changed('animation.easing', broken)
    settings_manager.on_changed('animation.easing', lambda new, _old: seen.append(new))

    settings_manager.set('animation.easing', 'linear')

    assert seen == ['linear']
    assert settings_manager.get('animation.easing') == 'linear'


def test_reset_to_defaults_notifies(settings_manager):
    settings_manager.set('animation.duration', 1.5)
    seen = []
    settings_manager.on_changed('animation.duration', lambda new, _old: seen.append(new))

    settings_manager.reset_to_defaults()

    assert seen == [DEFAULT_SETTINGS['animation.duration']]
    assert settings_manager.get_float('animation.duration') == pytest.approx(0.2)


def test_remove_and_contains(settings_manager):
    settings_manager.set("scratch.value", 1)
    assert settings_manager.contains("scratch.value")
    assert "scratch.value" in settings_manager.get_all_keys()

    settings_manager.remove("scratch.value")
    assert not settings_manager.contains("scratch.value")


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, True),
        ("yes", True),
        ("ON", True),
        ("0", False),
        ("off", False),
        (None, False),
        ("maybe", False),
        (1, True),
    ],
)
def test_to_bool(value, expected):
    assert SettingsManager.to_bool(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("0.25", 0.25),
        (3, 3.0),
        ("abc", 0.0),
        (None, 0.0),
        (True, 0.0),
    ],
)
def test_to_float(value, expected):
    assert SettingsManager.to_float(value) == expected


def test_typed_getters_tolerate_strings(settings_manager):
    settings_manager.set('animation.fps', "75")
    assert settings_manager.get_int('animation.fps') == 75
    settings_manager.set('animation.duration', "bad")
    assert settings_manager.get_float('animation.duration', 0.3) == 0.3


def test_save_persists_for_new_instance(settings_manager):
    settings_manager.set('animation.duration', 0.75)
    settings_manager.save()

    reopened = SettingsManager(organization="Test", application="WindowMotionTest")
    assert reopened.get_float('animation.duration') == pytest.approx(0.75)
