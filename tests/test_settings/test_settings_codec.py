import logging

import pytest

from thicklinepy.feature import FeatureType
from thicklinepy.parameters import ThickLineInputs
from thicklinepy.settings import (
    ThickLineSettings,
    decode_settings,
    encode_settings,
    load_settings,
    save_settings,
)


def test_defaults():
    s = ThickLineSettings()
    assert s.width_cm == 0.2
    assert s.feature_a_type == "None"
    assert s.feature_b_type == "None"
    assert s.lead_a_cm == 0.0 and s.lead_b_cm == 0.0
    assert s.feature_a_width_cm == 0.5 and s.feature_a_length_cm == 0.5
    assert s.feature_b_width_cm == 0.5 and s.feature_b_length_cm == 0.5


def test_encode_uses_fixed_keys():
    text = encode_settings(ThickLineSettings())
    keys = [line.split("=", 1)[0] for line in text.splitlines()]
    assert keys == [
        "width_cm",
        "featAType",
        "leadA_cm",
        "featAL_cm",
        "featAW_cm",
        "featBType",
        "leadB_cm",
        "featBL_cm",
        "featBW_cm",
    ]
    assert "featAType=None" in text.splitlines()


def test_round_trip():
    settings = ThickLineSettings(
        width_cm=0.35,
        feature_a_type="Arrow",
        lead_a_cm=1.1,
        feature_a_length_cm=0.7,
        feature_a_width_cm=0.9,
        feature_b_type="T",
        lead_b_cm=0.05,
        feature_b_length_cm=2.0,
        feature_b_width_cm=1e-3,
    )
    assert decode_settings(encode_settings(settings)) == settings


def test_bad_number_keeps_default():
    text = "\n".join(
        [
            "width_cm=0.4",
            "leadA_cm=abc",
            "leadB_cm=1.5",
            "featAType=T",
            "featAL_cm=0.25",
        ]
    )
    s = decode_settings(text)
    assert s.lead_a_cm == 0.0
    assert s.width_cm == 0.4
    assert s.lead_b_cm == 1.5
    assert s.feature_a_type == "T"
    assert s.feature_a_length_cm == 0.25


def test_tolerant_parsing():
    text = (
        "# comment line\n"
        "garbage without separator\n"
        "unknown_key=42\n"
        "width_cm=\n"
        "featBW_cm = 0.8 \r\n"
        "featBType=Arrow=extra\n"
        "=orphan\n"
    )
    s = decode_settings(text)
    assert s.width_cm == 0.2
    assert s.feature_b_width_cm == 0.8
    # Split happens once, at the first separator
    assert s.feature_b_type == "Arrow=extra"


def test_order_independent():
    s = decode_settings("featBL_cm=3\nwidth_cm=1\nfeatAType=Arrow\n")
    assert s == ThickLineSettings(width_cm=1.0, feature_a_type="Arrow", feature_b_length_cm=3.0)


def test_decode_none_returns_defaults():
    assert decode_settings(None) == ThickLineSettings()
    assert decode_settings("") == ThickLineSettings()


def test_unknown_feature_name_resolves_to_none(caplog):
    s = ThickLineSettings(feature_a_type="Circle")
    with caplog.at_level(logging.WARNING, logger="thicklinepy.settings"):
        assert s.feature_a is FeatureType.NONE
    assert "Circle" in caplog.text


def test_inputs_round_trip_through_settings():
    inputs = ThickLineInputs(
        a=(0, 0), b=(5, 0), width=0.3, lead_a=0.1, lead_b=0.2,
        feature_a="T", feature_a_width=0.6, feature_a_length=0.4,
    )
    settings = ThickLineSettings.from_inputs(inputs)
    assert settings.feature_a_type == "T"
    assert settings.feature_b_type == "None"

    rebuilt = settings.apply((0, 0), (5, 0))
    assert rebuilt == inputs


def test_load_missing_file_returns_defaults(tmp_path):
    assert load_settings(tmp_path / "missing" / "settings.ini") == ThickLineSettings()
    assert load_settings(None) == ThickLineSettings()


def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "dir" / "settings.ini"
    settings = ThickLineSettings(width_cm=0.25, feature_b_type="Arrow", lead_b_cm=0.5)

    assert save_settings(settings, path)
    assert path.exists()
    assert load_settings(path) == settings


def test_save_failure_is_reported_not_raised(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with caplog.at_level(logging.WARNING, logger="thicklinepy.settings"):
        ok = save_settings(ThickLineSettings(), blocker / "settings.ini")

    assert ok is False
    assert "Failed to save settings" in caplog.text


@pytest.mark.parametrize("value", ["1e-3", "  2.5", "-0.0", "10"])
def test_decimal_formats(value):
    s = decode_settings(f"leadB_cm={value}")
    assert s.lead_b_cm == float(value)


def test_malformed_path_is_reported_not_raised(caplog):
    path = "dir\0x/settings.ini"

    with caplog.at_level(logging.WARNING, logger="thicklinepy.settings"):
        assert save_settings(ThickLineSettings(), path) is False
    assert "Failed to save settings" in caplog.text

    assert load_settings(path) == ThickLineSettings()


def test_line_breaks_in_feature_names_do_not_add_keys():
    settings = ThickLineSettings(feature_a_type="Arrow\nwidth_cm=9", feature_b_type="T\r\n")
    text = encode_settings(settings)

    assert len(text.splitlines()) == 9
    decoded = decode_settings(text)
    assert decoded.width_cm == 0.2
    assert decoded.feature_a_type == "Arrow width_cm=9"
    assert decoded.feature_b_type == "T"
