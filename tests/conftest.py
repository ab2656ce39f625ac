"""Shared test fixtures for svcat-auto tests."""

import json
from unittest.mock import MagicMock, patch

import pytest

from svcat_auto.catalog.cache import ServiceInstanceCache
from svcat_auto.core.tools import Kubectl, Svcat
from svcat_auto.models import CommandResult

INSTANCE_LISTING = """\
   NAME      NAMESPACE       CLASS         PLAN     STATUS
+--------+-------------+---------------+---------+--------+
  mydb     default       azure-mysql     basic     Ready
  cache    staging       azure-redis     premium   Ready
  queue    default       azure-servicebus standard Provisioning
"""


@pytest.fixture
def mock_kube_contexts():
    """Mock kubernetes config contexts."""
    with patch("kubernetes.config.list_kube_config_contexts") as mock:
        context = {"name": "test-context", "context": {"cluster": "test", "namespace": "apps"}}
        mock.return_value = ([context], context)
        yield mock


@pytest.fixture
def mock_kube_config():
    """Mock kubernetes config loading."""
    with patch("kubernetes.config.load_kube_config") as mock:
        yield mock


@pytest.fixture
def mock_subprocess():
    """Mock subprocess.run for command execution."""
    with patch("subprocess.run") as mock:
        mock.return_value = MagicMock(returncode=0, stdout="", stderr="")
        yield mock


@pytest.fixture
def instance_listing():
    """Sample ``svcat get instances`` output."""
    return INSTANCE_LISTING


@pytest.fixture
def svcat():
    """Svcat wrapper with mocked commands."""
    mock = MagicMock(spec=Svcat)
    mock.get_instances.return_value = CommandResult(0, INSTANCE_LISTING, "")
    mock.bind.return_value = CommandResult(0, "", "")
    return mock


@pytest.fixture
def kubectl():
    """Kubectl wrapper with mocked commands."""
    mock = MagicMock(spec=Kubectl)
    secret = {
        "apiVersion": "v1",
        "kind": "Secret",
        "metadata": {"name": "mydb", "namespace": "default"},
        "data": {"USERNAME": "dXNlcg==", "PASSWORD": "cGFzcw=="},
    }
    mock.get_json.return_value = CommandResult(0, json.dumps(secret), "")
    return mock


@pytest.fixture
def cache(svcat):
    """Empty service instance cache backed by the mocked svcat."""
    return ServiceInstanceCache(svcat)


@pytest.fixture
def chart_dir(tmp_path):
    """A minimal chart with an existing values file."""
    chart = tmp_path / "mychart"
    chart.mkdir()
    (chart / "Chart.yaml").write_text("apiVersion: v2\nname: mychart\nversion: 0.1.0\n")
    (chart / "values.yaml").write_text("replicaCount: 1\nimage:\n  repository: nginx\n")
    return chart
