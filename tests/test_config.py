import pytest

import config
from readiness import ProbeTarget


def test_stack_services():
    names = [s['display_name'] for s in config.STACK_SERVICES]
    assert names == ['WordPress', 'Grafana', 'Prometheus', 'cAdvisor']


def test_build_targets_skips_unchecked_services():
    targets = config.build_targets(max_attempts=3, interval=0.5)

    assert [t.name for t in targets] == ['WordPress', 'Grafana', 'Prometheus']
    assert targets[1] == ProbeTarget('Grafana', 'http://localhost:3000', 3, 0.5)


def test_build_targets_uses_configured_defaults():
    [target] = config.build_targets([config.STACK_SERVICES[2]])
    assert target.max_attempts == config.MAX_ATTEMPTS
    assert target.interval == config.PROBE_INTERVAL


def test_env_number(monkeypatch):
    monkeypatch.setenv('STACKUP_TEST_VALUE', '7')
    assert config._env_number('STACKUP_TEST_VALUE', 1, cast=int) == 7

    monkeypatch.setenv('STACKUP_TEST_VALUE', '')
    assert config._env_number('STACKUP_TEST_VALUE', 1.5) == 1.5

    monkeypatch.delenv('STACKUP_TEST_VALUE')
    assert config._env_number('STACKUP_TEST_VALUE', 2.0) == 2.0


@pytest.mark.parametrize("raw", ["ten", "-1"])
def test_env_number_rejects(monkeypatch, raw):
    monkeypatch.setenv('STACKUP_TEST_VALUE', raw)
    with pytest.raises(ValueError, match='STACKUP_TEST_VALUE'):
        config._env_number('STACKUP_TEST_VALUE', 1, cast=int)


@pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
def test_env_number_rejects_non_finite(monkeypatch, raw):
    monkeypatch.setenv('STACKUP_TEST_VALUE', raw)
    with pytest.raises(ValueError, match='must be finite'):
        config._env_number('STACKUP_TEST_VALUE', 2.0)
