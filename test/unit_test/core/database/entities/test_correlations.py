"""Unit tests for correlation entity model."""

from __future__ import annotations

from panelhub.core.database.entities.correlations import Correlation


class TestCorrelation:
    """Tests for Correlation entity model."""

    def test_correlation_creation_valid_data(self):
        correlation = Correlation(
            uid="c1a2b3c4d5e6f7",
            source_uid="prom-main",
            target_uid="loki-main",
            label="logs",
            description="Jump to logs",
        )

        assert correlation.uid == "c1a2b3c4d5e6f7"
        assert correlation.source_uid == "prom-main"
        assert correlation.target_uid == "loki-main"
        assert correlation.label == "logs"
        assert correlation.description == "Jump to logs"

    def test_correlation_defaults(self):
        """Label and description default to empty strings."""
        correlation = Correlation(uid="c1", source_uid="s", target_uid="t")

        assert correlation.label == ""
        assert correlation.description == ""

    def test_composite_primary_key(self):
        """Test that uid and source_uid together form the primary key."""
        table = Correlation.__table__

        assert table.name == "correlation"
        assert [c.name for c in table.primary_key.columns] == ["uid", "source_uid"]
        assert table.c.target_uid.index is True
