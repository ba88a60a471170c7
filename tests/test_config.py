import os

import pytest
from rasterkit.config import DEFAULT_WORKER_MULTIPLIER, WORKERS_ENV_VAR, default_worker_count


def test_default_is_multiple_of_cpu_count():
    assert default_worker_count({}) == DEFAULT_WORKER_MULTIPLIER * (os.cpu_count() or 1)


def test_env_override():
    assert default_worker_count({WORKERS_ENV_VAR: "5"}) == 5
    assert default_worker_count({WORKERS_ENV_VAR: " 7 "}) == 7


def test_blank_env_uses_default():
    assert default_worker_count({WORKERS_ENV_VAR: ""}) == default_worker_count({})


@pytest.mark.parametrize("raw", ["0", "-2", "two", "1.5"])
def test_bad_env_values(raw):
    with pytest.raises(ValueError):
        default_worker_count({WORKERS_ENV_VAR: raw})


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv(WORKERS_ENV_VAR, "11")
    assert default_worker_count() == 11
