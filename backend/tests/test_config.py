"""
Tests for settings and parameter files
"""

import pytest

from wscommons.core.config import get_settings
from wscommons.core.params import parse_param_line, read_params

ENV_VARS = [
    "WSC_HOST",
    "WSC_PORT",
    "WSC_CORS_ORIGINS",
    "WSC_LOG_SINK",
    "WSC_LOG_LEVEL",
    "WSC_LOG_PATH",
    "WSC_TRACE",
    "WSC_PARAMS_PATH",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    # keep load_dotenv away from any .env in the working tree
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.mark.parametrize(
    "line,parsed",
    [
        ("Host: example.com", ("host", "example.com")),
        ("  url : http://a.b/c?x=1 ", ("url", "http://a.b/c?x=1")),
        ("# comment: no", None),
        ("", None),
        ("   ", None),
        ("no colon here", None),
        ("key:", ("key", "")),
    ],
)
def test_parse_param_line(line, parsed):
    assert parse_param_line(line) == parsed


def test_read_params(tmp_path):
    path = tmp_path / "params.txt"
    path.write_text(
        "# service parameters\n"
        "Consumer_Key: ck\n"
        "\n"
        "url: http://example.com/resource\n"
        "garbage line\n"
        "consumer_key: ck2\n",
        encoding="utf-8",
    )
    assert read_params(str(path)) == {"consumer_key": "ck2", "url": "http://example.com/resource"}


def test_read_params_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_params(str(tmp_path / "absent.txt"))


def test_settings_defaults(clean_env):
    s = get_settings()
    assert s.host == "0.0.0.0"
    assert s.port == 8000
    assert s.cors_origins == ["http://localhost:5173"]
    assert s.log_sink == "stderr"
    assert s.log_level == "info"
    assert s.trace is False
    assert s.params == {}


def test_settings_from_env(clean_env, tmp_path):
    params = tmp_path / "p.txt"
    params.write_text("token: tk\n", encoding="utf-8")
    clean_env.setenv("WSC_PORT", "9001")
    clean_env.setenv("WSC_CORS_ORIGINS", "http://a, http://b ,")
    clean_env.setenv("WSC_LOG_SINK", "File")
    clean_env.setenv("WSC_LOG_LEVEL", "WARNING")
    clean_env.setenv("WSC_PARAMS_PATH", str(params))
    s = get_settings()
    assert s.port == 9001
    assert s.cors_origins == ["http://a", "http://b"]
    assert s.log_config().sink == "file"
    assert s.log_config().level == "warning"
    assert s.params == {"token": "tk"}


def test_trace_flag_forces_trace_level(clean_env):
    clean_env.setenv("WSC_TRACE", "yes")
    s = get_settings()
    assert s.trace is True
    assert s.log_config().level == "trace"


@pytest.mark.parametrize("var,value", [("WSC_LOG_SINK", "printer"), ("WSC_LOG_LEVEL", "loud"), ("WSC_PORT", "x")])
def test_settings_reject_bad_values(clean_env, var, value):
    clean_env.setenv(var, value)
    with pytest.raises(ValueError):
        get_settings()
