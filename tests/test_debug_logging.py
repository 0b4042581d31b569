import pytest
from loguru import logger

from multieff.build import handle
from multieff.config import RunConfig
from multieff.level3_core_effects import ask, reader_handler
from multieff.run import sync_run


@pytest.fixture
def captured():
    messages: list[str] = []
    sink_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)


class TestDebugLogging:
    def test_silent_by_default(self, registry, captured):
        sync_run(handle(ask(), reader_handler(1)), registry, config=RunConfig()).unwrap()

        assert captured == []

    def test_debug_config_logs_machine_events(self, registry, captured):
        result = sync_run(handle(ask(), reader_handler(1)), registry, config=RunConfig(debug=True))

        assert result.unwrap() == 1
        assert any(m.startswith("install frame") for m in captured)
        assert any(m.startswith("dispatch ask") for m in captured)
        assert any(m.startswith("run finished") for m in captured)

    def test_debug_from_environment_is_switched_off_after_run(self, registry, captured, monkeypatch):
        monkeypatch.setenv("MULTIEFF_DEBUG", "1")
        sync_run(handle(ask(), reader_handler(1)), registry)
        captured.clear()

        sync_run(handle(ask(), reader_handler(1)), registry, config=RunConfig())

        assert captured == []
