"""`python -m ask` hands control to the CLI router."""

import runpy
from unittest.mock import patch

import pytest


def test_python_dash_m_exits_with_router_status() -> None:
    with patch("ask.cli.main", return_value=1) as mock_main:
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("ask.__main__", run_name="__main__")

    assert exc_info.value.code == 1
    mock_main.assert_called_once_with()


def test_python_dash_m_propagates_success() -> None:
    with patch("ask.cli.main", return_value=0):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("ask.__main__", run_name="__main__")

    assert exc_info.value.code == 0
