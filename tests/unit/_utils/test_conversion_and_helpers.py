import logging

import pytest
import numpy as np
import pandas as pd

from correlatica._utils import (
    convert_numpy, convert_dataframe, convert_key,
    temp_log_level, verbose_context, read_config)
from correlatica.types import Point

POINTS = [Point("a", 1, 2.5), Point("b", 2, 3.0), Point("c", 4, -1.0)]

# tests for _utils.convert_numpy

def test_convert_numpy_preserves_order_and_dtype():
    x, y = convert_numpy(POINTS)
    assert x.dtype == np.float64 and y.dtype == np.float64
    assert x.tolist() == [1.0, 2.0, 4.0]
    assert y.tolist() == [2.5, 3.0, -1.0]

@pytest.mark.parametrize("points", [[], (), iter([])])
def test_convert_numpy_empty_input(points):
    x, y = convert_numpy(list(points))
    assert x.size == 0 and y.size == 0

# tests for _utils.convert_dataframe

def test_convert_dataframe_indexed_by_id():
    df = convert_dataframe(POINTS)
    expected = pd.DataFrame({"x": [1.0, 2.0, 4.0], "y": [2.5, 3.0, -1.0]},
                            index=pd.Index(["a", "b", "c"], name="id", dtype=object))
    pd.testing.assert_frame_equal(df, expected)

def test_convert_dataframe_empty_input():
    df = convert_dataframe([])
    assert df.empty
    assert list(df.columns) == ["x", "y"]

# tests for _utils.convert_key

@pytest.mark.parametrize("key", ["Anscombe A", "anscombe-a", "ANSCOMBE_A",
                                 "  anscombe   a ", "Anscombe_-A"])
def test_convert_key_variants(key):
    assert convert_key(key) == "anscombe_a"

# tests for _utils.temp_log_level and _utils.verbose_context

def test_temp_log_level_restores_level():
    logger = logging.getLogger("correlatica.test_temp_log_level")
    logger.setLevel(logging.WARNING)
    with temp_log_level(logger, logging.DEBUG):
        assert logger.level == logging.DEBUG
    assert logger.level == logging.WARNING

def test_temp_log_level_restores_level_on_error():
    logger = logging.getLogger("correlatica.test_temp_log_level_error")
    logger.setLevel(logging.ERROR)
    with pytest.raises(RuntimeError):
        with temp_log_level(logger, logging.INFO):
            raise RuntimeError("boom")
    assert logger.level == logging.ERROR

@pytest.mark.parametrize("verbose, expected", [(True, logging.INFO),
                                               (False, logging.WARNING)])
def test_verbose_context(verbose, expected):
    logger = logging.getLogger("correlatica.test_verbose_context")
    logger.setLevel(logging.WARNING)
    with verbose_context(logger, verbose):
        assert logger.level == expected
    assert logger.level == logging.WARNING

# tests for _utils.read_config

def test_read_config_settings_defaults():
    settings = read_config("settings")
    assert settings["generator"] == {"size": 20, "noise_base": 1.7,
                                     "noise_scale": 1.5, "noise_amplitude": 10,
                                     "y_offset": 10}
    assert settings["thresholds"] == {"strong": 0.7, "moderate": 0.3}
    assert settings["default_correlation_target"] == 0.8
    assert settings["domain"] == [0, 20]

def test_read_config_is_cached():
    assert read_config("messages") is read_config("messages")

def test_read_config_missing_file():
    with pytest.raises(FileNotFoundError):
        read_config("does_not_exist")
