"""Test fixtures and factories."""

from tests.fixtures.mocks import (
    FailingSink,
    ScriptedRandomSource,
    create_mock_sink,
    sent_messages,
    summary_values,
)
from tests.fixtures.plugins import (
    DependentPlugin,
    FailingInitPlugin,
    FailingTestPlugin,
    SampleTestPlugin,
    create_test_plugin,
    create_test_tool,
    sample_tool_parameters,
)

__all__ = [
    # Mocks
    "FailingSink",
    "ScriptedRandomSource",
    "create_mock_sink",
    "sent_messages",
    "summary_values",
    # Plugins
    "DependentPlugin",
    "FailingInitPlugin",
    "FailingTestPlugin",
    "SampleTestPlugin",
    "create_test_plugin",
    "create_test_tool",
    "sample_tool_parameters",
]
