"""Tests for core/cluster.py module."""

from unittest.mock import MagicMock, patch

import click
import pytest
from kubernetes.client.exceptions import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import MaxRetryError, NewConnectionError

from svcat_auto.core.cluster import Cluster
from svcat_auto.exceptions import ClusterConnectionError
from svcat_auto.models import PodLookup


class TestClusterContextSelection:
    """Tests for context selection functionality."""

    def test_current_context(self, mock_kube_contexts, mock_kube_config):
        """Test using current context without selection."""
        cluster = Cluster(select_context=False)

        assert cluster.context == "test-context"
        assert cluster.namespace == "apps"
        mock_kube_config.assert_called_once_with(context="test-context")

    def test_namespace_defaults(self, mock_kube_config):
        """Test a context without namespace uses default."""
        with patch("kubernetes.config.list_kube_config_contexts") as mock_contexts:
            context = {"name": "bare", "context": {"cluster": "c"}}
            mock_contexts.return_value = ([context], context)

            cluster = Cluster(select_context=False)

        assert cluster.namespace == "default"

    def test_context_with_selection(self, mock_kube_config):
        """Test prompting user for context selection."""
        contexts = [
            {"name": "context1", "context": {"namespace": "one"}},
            {"name": "context2", "context": {"namespace": "two"}},
        ]
        with (
            patch("kubernetes.config.list_kube_config_contexts") as mock_contexts,
            patch("questionary.select") as mock_select,
        ):
            mock_contexts.return_value = (contexts, contexts[0])
            mock_select.return_value.ask.return_value = "context2"

            cluster = Cluster(select_context=True)

        assert cluster.context == "context2"
        assert cluster.namespace == "two"
        assert mock_select.call_args.kwargs["choices"] == ["context1", "context2"]

    def test_selection_cancelled(self, mock_kube_contexts, mock_kube_config):
        """Test cancelling context selection aborts."""
        with patch("questionary.select") as mock_select:
            mock_select.return_value.ask.return_value = None

            with pytest.raises(click.Abort):
                Cluster(select_context=True)

    def test_invalid_kubeconfig(self):
        """Test error when kubeconfig is invalid or missing."""
        with patch("kubernetes.config.list_kube_config_contexts") as mock_contexts:
            mock_contexts.side_effect = ConfigException("Invalid kube-config file. No configuration found.")

            with pytest.raises(ClusterConnectionError) as exc_info:
                Cluster(select_context=False)

        assert "Invalid or missing kubeconfig" in str(exc_info.value)


class TestFindAllPods:
    """Tests for pod discovery."""

    def test_lists_pods_in_namespace(self, mock_kube_contexts, mock_kube_config):
        """Test pod names from the context namespace."""
        cluster = Cluster(select_context=False)

        with patch("kubernetes.client.CoreV1Api") as mock_api:
            pods = []
            for name in ("web-1", "web-2"):
                pod = MagicMock()
                pod.metadata.name = name
                pods.append(pod)
            mock_api.return_value.list_namespaced_pod.return_value.items = pods

            lookup = cluster.find_all_pods()

        assert lookup == PodLookup(succeeded=True, pods=["web-1", "web-2"])
        mock_api.return_value.list_namespaced_pod.assert_called_once_with("apps")

    def test_connection_error(self, mock_kube_contexts, mock_kube_config):
        """Test an unreachable cluster yields a failed lookup."""
        cluster = Cluster(select_context=False)

        with patch("kubernetes.client.CoreV1Api") as mock_api:
            connection_error = NewConnectionError(None, "Failed to establish a new connection")
            mock_api.return_value.list_namespaced_pod.side_effect = MaxRetryError(
                pool=None, url="/api/v1/pods", reason=connection_error
            )

            lookup = cluster.find_all_pods()

        assert lookup == PodLookup(succeeded=False, pods=[])

    def test_api_error(self, mock_kube_contexts, mock_kube_config):
        """Test a forbidden listing yields a failed lookup."""
        cluster = Cluster(select_context=False)

        with patch("kubernetes.client.CoreV1Api") as mock_api:
            mock_api.return_value.list_namespaced_pod.side_effect = ApiException(status=403, reason="Forbidden")

            lookup = cluster.find_all_pods()

        assert lookup.succeeded is False
