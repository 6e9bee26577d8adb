import io

import pytest

from console_flashlight.control.control_system import load_config
from console_flashlight.high_level.flashlight_system import FlashlightSystem
from console_flashlight.low_level.io.console import ConsoleOutput


class FakeSleep:
    """Records requested delays instead of sleeping."""

    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)

    @property
    def total(self):
        return sum(self.calls)


class RecordingOutput(ConsoleOutput):
    """ConsoleOutput that also keeps every (pattern, intensity) it rendered."""

    def __init__(self, stream):
        super().__init__(stream)
        self.renders = []

    def render(self, pattern, intensity=0):
        self.renders.append((pattern, intensity))
        return super().render(pattern, intensity)


@pytest.fixture
def fake_sleep():
    return FakeSleep()


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def output(stream):
    return RecordingOutput(stream)


@pytest.fixture
def light(output, fake_sleep):
    return FlashlightSystem(output, sleep=fake_sleep)


@pytest.fixture
def cfg():
    return load_config()
