"""Shared fixtures for benchsys tests."""

import pytest

from benchsys.system.runner import CommandResult, CommandRunner


class FakeExecutor:
    """Serve canned command output and record every invocation."""

    def __init__(self, responses=None, default=None):
        self.responses = responses or {}
        self.default = default or CommandResult(output="", exit_code=1)
        self.calls = []

    def __call__(self, command, args):
        self.calls.append((command, tuple(args)))
        return self.responses.get((command, tuple(args)), self.default)


@pytest.fixture
def fake_runner():
    """Build a CommandRunner backed by canned responses.

    Keys are ``(command, (arg, ...))``; values are output strings (exit 0)
    or full CommandResult objects.
    """

    def _create(responses=None):
        normalized = {}
        for key, value in (responses or {}).items():
            if isinstance(value, str):
                value = CommandResult(output=value, exit_code=0)
            normalized[key] = value
        executor = FakeExecutor(normalized)
        return CommandRunner(executor), executor

    return _create
