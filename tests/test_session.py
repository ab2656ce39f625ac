"""Tests for core/session.py module."""

from pathlib import Path
from unittest.mock import patch

import pytest

from svcat_auto.core.session import Session
from svcat_auto.exceptions import BinaryNotFoundError


@pytest.fixture
def session(mock_kube_contexts, mock_kube_config):  # noqa: ARG001
    """Session on the mocked current context."""
    return Session(select_context=False)


class TestSessionTools:
    """Tests for lazily resolved tools."""

    def test_tools_bound_to_context(self, session):
        """Test both wrappers use the session context."""
        with patch("shutil.which", side_effect=lambda name: f"/usr/bin/{name}"):
            assert session.svcat.binary == "/usr/bin/svcat"
            assert session.svcat.context == "test-context"
            assert session.kubectl.binary == "/usr/bin/kubectl"
            assert session.kubectl.context == "test-context"

    def test_missing_svcat_only_fails_on_use(self, session):
        """Test svcat is resolved only when needed."""
        with patch("shutil.which", return_value=None):
            with pytest.raises(BinaryNotFoundError):
                _ = session.svcat

    def test_single_cache_per_session(self, session):
        """Test the instance cache lives as long as the session."""
        with patch("shutil.which", return_value="/usr/bin/svcat"):
            assert session.instances is session.instances


class TestSessionCommands:
    """Tests for command dispatch."""

    def test_bind_uses_session_cache(self, session):
        """Test the workflow receives the session's cache and tools."""
        with (
            patch("shutil.which", side_effect=lambda name: f"/usr/bin/{name}"),
            patch("svcat_auto.core.session.BindingWorkflow") as mock_workflow,
        ):
            session.bind(chart=Path("/charts/app"))

        kwargs = mock_workflow.call_args.kwargs
        assert kwargs["cache"] is session.instances
        assert kwargs["chart"] == Path("/charts/app")
        mock_workflow.return_value.run.assert_called_once()

    def test_list_instances_prints_table(self, session):
        """Test listed instances are printed."""
        with (
            patch("shutil.which", return_value="/usr/bin/svcat"),
            patch("svcat_auto.core.session.ServiceInstanceCache") as mock_cache,
            patch("svcat_auto.core.session.console.instances_table") as mock_table,
        ):
            mock_cache.return_value.get_service_instances.return_value = ["instance"]
            assert session.list_instances() == ["instance"]

        mock_table.assert_called_once_with(["instance"])

    def test_port_forward_uses_cluster(self, session):
        """Test port-forward receives the session cluster and kubectl."""
        with (
            patch("shutil.which", return_value="/usr/bin/kubectl"),
            patch("svcat_auto.core.session.port_forward") as mock_forward,
        ):
            session.port_forward(pod="web-1", local_port=9000)

        mock_forward.assert_called_once_with(
            session.cluster, session.kubectl, pod="web-1", document=None, local_port=9000
        )

    def test_show_data_uses_context_namespace(self, session):
        """Test data entries are read from the context namespace."""
        with (
            patch("shutil.which", return_value="/usr/bin/kubectl"),
            patch("svcat_auto.core.session.load_config_data", return_value="value") as mock_load,
            patch("svcat_auto.core.session.console.plain") as mock_plain,
        ):
            assert session.show_data("cm/app", "key") == "value"

        mock_load.assert_called_once_with(session.kubectl, "configmaps", "app", "key", "apps")
        mock_plain.assert_called_once_with("value")
