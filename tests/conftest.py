import pytest

from registrar import (
    BaseChild,
    BaseSettingsChild,
    Registry,
    SettingsRegistry,
    TypeTable,
)


MOCK_TYPE = "mock.child"
OTHER_MOCK_TYPE = "mock.other_child"
SETTINGS_TYPE = "mock.settings_child"
FAILING_CONSTRUCTOR_TYPE = "mock.failing_constructor"
FAILING_CLOSE_TYPE = "mock.failing_close"


# -------------------------------------------------
# Mock children
# -------------------------------------------------

class MockChild(BaseChild):
    pass


class OtherMockChild(BaseChild):
    pass


class MockSettingsChild(BaseSettingsChild):
    pass


class FailingConstructorChild(BaseChild):
    def __init__(self):
        raise RuntimeError("constructor exploded")


class FailingCloseChild(BaseChild):
    def close_without_remove(self):
        raise RuntimeError("refusing to close")


class EventRecorder:
    """Observer that keeps every event it receives."""

    def __init__(self):
        self.events = []

    def __call__(self, event):
        self.events.append(event)

    @property
    def types(self):
        return [event.type for event in self.events]


# -------------------------------------------------
# Fixtures
# -------------------------------------------------

@pytest.fixture
def types():
    return TypeTable(
        name="test",
        entries={
            MOCK_TYPE: MockChild,
            OTHER_MOCK_TYPE: OtherMockChild,
            SETTINGS_TYPE: MockSettingsChild,
            FAILING_CONSTRUCTOR_TYPE: FailingConstructorChild,
            FAILING_CLOSE_TYPE: FailingCloseChild,
        },
    )


@pytest.fixture
def registry(types):
    return Registry(types=types)


@pytest.fixture
def settings_registry(types):
    return SettingsRegistry(types=types)


@pytest.fixture
def recorder():
    return EventRecorder()


@pytest.fixture
def mock_child_cls():
    return MockChild


@pytest.fixture
def other_mock_child_cls():
    return OtherMockChild


@pytest.fixture
def settings_child_cls():
    return MockSettingsChild
