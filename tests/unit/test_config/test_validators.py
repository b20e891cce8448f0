"""
Unit tests for configuration validation functionality.

Tests the validation of the `[monitor]` table, its defaults, and the
errors raised for invalid values.
"""

from pathlib import Path

import pytest

from uidmonitor.config.validators import validate_monitor_config, validate_source_config
from uidmonitor.models import ChargerState
from uidmonitor.validation import ValidationError


@pytest.mark.unit
class TestMonitorConfigValidation:
    """Test cases for monitor configuration validation."""

    def test_validate_monitor_config_success(self, sample_config_data):
        """Test successful validation of a complete configuration."""
        config = validate_monitor_config(sample_config_data)

        assert config.source.type == "proc"
        assert config.source.path == Path("/proc/uid_io/stats")
        assert config.report_interval_seconds == 600.0
        assert config.initial_charger_state is ChargerState.ON
        assert config.dump_hours == 24.0
        assert config.dump_threshold == 1024
        assert config.log_level == "DEBUG"

    def test_validate_monitor_config_defaults(self):
        """Test that an empty table yields the defaults."""
        config = validate_monitor_config({})

        assert config.source.type == "proc"
        assert config.report_interval_seconds == 3600.0
        assert config.initial_charger_state is ChargerState.OFF
        assert config.dump_hours == 0.0
        assert config.dump_threshold == 0
        assert config.log_level == "INFO"

    def test_charger_state_is_case_insensitive(self, sample_config_data):
        sample_config_data["reporting"]["initial_charger_state"] = "OFF"

        config = validate_monitor_config(sample_config_data)

        assert config.initial_charger_state is ChargerState.OFF

    def test_log_level_normalized(self, sample_config_data):
        sample_config_data["general"]["log_level"] = "warning"

        assert validate_monitor_config(sample_config_data).log_level == "WARNING"

    @pytest.mark.parametrize(
        "section,key,value,field",
        [
            ("reporting", "interval_seconds", 0.5, "interval_seconds"),
            ("reporting", "interval_seconds", 100000, "interval_seconds"),
            ("reporting", "interval_seconds", "soon", "interval_seconds"),
            ("reporting", "initial_charger_state", "usb", "initial_charger_state"),
            ("dump", "hours", -1, "hours"),
            ("dump", "threshold", -5, "threshold"),
            ("dump", "threshold", True, "threshold"),
            ("general", "log_level", "LOUD", "log_level"),
        ],
    )
    def test_invalid_values_name_the_field(self, sample_config_data, section, key, value, field):
        """Test validation failure with invalid values."""
        sample_config_data[section][key] = value

        with pytest.raises(ValidationError) as exc_info:
            validate_monitor_config(sample_config_data)

        assert field in str(exc_info.value)
        assert exc_info.value.field_name == f"monitor.{section}.{key}"


@pytest.mark.unit
class TestSourceConfigValidation:
    """Test cases for `[monitor.source]` validation."""

    def test_psutil_source(self):
        config = validate_source_config({"type": "psutil"})
        assert config.type == "psutil"

    def test_unknown_source_type(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_source_config({"type": "binder"})
        assert "monitor.source.type" in str(exc_info.value)

    @pytest.mark.parametrize("path", ["", "   ", 42])
    def test_invalid_path(self, path):
        with pytest.raises(ValidationError) as exc_info:
            validate_source_config({"type": "proc", "path": path})
        assert exc_info.value.field_name == "monitor.source.path"
