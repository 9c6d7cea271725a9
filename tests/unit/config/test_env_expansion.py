"""Tests for environment variable expansion utilities."""
import os
from unittest.mock import patch

from patterns_demo.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:

    def test_expand_braced_env_var_with_subpath(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        assert expand_env_vars("$PATTERNS_DEMO_NONEXISTENT_VAR") == "$PATTERNS_DEMO_NONEXISTENT_VAR"

    def test_expand_nested_structures(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {"storage": {"json_path": "$TEST_VAR/orders.json"}, "tags": ["$TEST_VAR", 3]}

            assert expand_config_env_vars(config) == {
                "storage": {"json_path": "/test/path/orders.json"},
                "tags": ["/test/path", 3],
            }

    def test_non_string_values_untouched(self):
        assert expand_env_vars({"count": 5, "enabled": True, "empty": None}) == \
            {"count": 5, "enabled": True, "empty": None}
