import importlib


def test_settings_constants():
    settings = importlib.import_module("toyrc.settings")
    assert 1 << settings.PROB_BITS == 16
    assert settings.PROB_MIN <= settings.PROB_START <= settings.PROB_MAX
    assert settings.ADAPTIVE < 0
    assert settings.WIDTH_INIT < settings.LOW_MODULUS
    assert settings.RENORM_THRESHOLD * 10 == settings.LOW_MODULUS
    assert settings.MARKER == ord("0")
