"""Tests for console.py module."""

import io
from unittest.mock import patch

import pytest
from rich.console import Console

from svcat_auto import console
from svcat_auto.models import ServiceInstance


@pytest.fixture
def output():
    """Replace the shared console with one rendering to a buffer."""
    buffer = io.StringIO()
    recording = Console(file=buffer, width=120, theme=console._THEME, color_system=None)
    with patch.object(console, "console", recording):
        yield buffer


class TestMessages:
    """Tests for message markers."""

    @pytest.mark.parametrize(
        ("emit", "marker"),
        [
            (console.info, "ℹ"),
            (console.success, "✓"),
            (console.warning, "⚠"),
            (console.error, "✗"),
            (console.action, "→"),
            (console.step, "•"),
        ],
    )
    def test_marker_precedes_message(self, output, emit, marker):
        """Test each level renders its marker before the message."""
        emit("Error retrieving Service Instances")

        assert output.getvalue() == f"{marker} Error retrieving Service Instances\n"

    def test_highlight_inside_message(self, output):
        """Test highlighted names render without their markup."""
        console.step(f"Created binding {console.highlight('mydb')}")

        assert output.getvalue() == "• Created binding mydb\n"


class TestPlain:
    """Tests for verbatim output."""

    def test_brackets_are_not_markup(self, output):
        """Test usage notes keep square brackets."""
        console.plain("// MYDB_[USERNAME]")

        assert output.getvalue() == "// MYDB_[USERNAME]\n"

    def test_multiline_block(self, output):
        """Test a copied block keeps its lines."""
        block = "// To use service mydb\n// MYDB_USERNAME\n// MYDB_PASSWORD"

        console.plain(block)

        assert output.getvalue().splitlines() == block.splitlines()


class TestInstancesTable:
    """Tests for the instances listing."""

    def test_rows_in_listing_order(self, output):
        """Test every instance is shown with its columns."""
        console.instances_table(
            [
                ServiceInstance("mydb", "default", "azure-mysql", "basic", "Ready"),
                ServiceInstance("queue", "default", "azure-servicebus", "standard", "Provisioning"),
            ]
        )

        text = output.getvalue()
        assert "External Services" in text
        for header in ("Name", "Namespace", "Class", "Plan", "Status"):
            assert header in text
        assert text.index("mydb") < text.index("queue")
        assert "azure-servicebus" in text
        assert "Provisioning" in text

    def test_missing_columns_blank(self, output):
        """Test a short row renders blanks instead of None."""
        console.instances_table([ServiceInstance("partial", "default", None, None, None)])

        text = output.getvalue()
        assert "partial" in text
        assert "None" not in text

    def test_empty_listing(self, output):
        """Test an empty listing still renders the headers."""
        console.instances_table([])

        assert "Name" in output.getvalue()


class TestSummaryPanel:
    """Tests for the port-forward summary."""

    def test_labels_and_values(self, output):
        """Test labels and values appear in the panel."""
        console.summary_panel("Port Forward", {"Pod": "web-1", "Local": "127.0.0.1:10000"})

        text = output.getvalue()
        assert "Port Forward" in text
        assert "Pod:" in text
        assert "web-1" in text
        assert "127.0.0.1:10000" in text
