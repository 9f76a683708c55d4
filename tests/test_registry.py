"""Tests for the definition registry."""

import pytest

from compfilter.definition import Definition
from compfilter.models import CompfilterError, CompletionReply, CompletionRequest


def _request(*words: str) -> CompletionRequest:
    return CompletionRequest(words=list(words), cword=len(words) - 1)


class Dummy(Definition):
    commands = ["dummy", "dummy2"]

    def complete(self, request):
        return CompletionReply([request.cur + "!"])


class TestDispatch:
    """Tests for handler registration and dispatch."""

    def test_register(self, registry):
        registry.register("tool", lambda req: CompletionReply(["x"]))
        assert registry.commands == ["tool"]
        assert registry.complete(_request("tool", "")).suggestions == ["x"]

    def test_unknown_command(self, registry):
        assert registry.complete(_request("nope", "")) is None

    def test_command_path(self, registry):
        registry.register("tool", lambda req: CompletionReply(["x"]))
        assert registry.complete(_request("/usr/bin/tool", "")) is not None

    def test_replace_handler(self, registry):
        registry.register("tool", lambda req: CompletionReply(["old"]))
        registry.register("tool", lambda req: CompletionReply(["new"]))
        assert registry.complete(_request("tool", "")).suggestions == ["new"]

    def test_failing_handler(self, registry, mocker):
        handler = mocker.Mock(side_effect=ValueError("boom"))
        registry.register("tool", handler)
        assert registry.complete(_request("tool", "a")) is None
        handler.assert_called_once()

    def test_add_definition(self, registry):
        registry.add_definition(Dummy("dummy"))
        assert registry.commands == ["dummy", "dummy2"]
        assert registry.complete(_request("dummy2", "a")).suggestions == ["a!"]

    def test_default_definition_falls_back(self, registry):
        base = Definition("base")
        base.commands = ["base"]
        registry.add_definition(base)
        assert registry.complete(_request("base", "")) is None


@pytest.mark.asyncio
async def test_load_directory(registry, definitions_dir):
    (definitions_dir / "_private.py").write_text("raise RuntimeError('not loaded')")
    (definitions_dir / "README").write_text("ignored")
    assert await registry.load_directory(definitions_dir) == 1
    assert registry.commands == ["mytool"]
    assert "mytool" in registry.definitions


@pytest.mark.asyncio
async def test_load_missing_directory(registry, tmp_path):
    assert await registry.load_directory(tmp_path / "nope") == 0
    assert registry.commands == []


@pytest.mark.asyncio
async def test_load_broken_file(registry, tmp_path):
    (tmp_path / "broken.py").write_text("def oops(:\n")
    with pytest.raises(CompfilterError):
        await registry.load_directory(tmp_path)


@pytest.mark.asyncio
async def test_load_file_without_extension(registry, tmp_path):
    (tmp_path / "empty.py").write_text("X = 1\n")
    with pytest.raises(CompfilterError):
        await registry.load_directory(tmp_path)


@pytest.mark.asyncio
async def test_load_module(registry):
    assert await registry.load_module("compfilter_examples.mytool") is True
    assert registry.commands == ["mytool"]


@pytest.mark.asyncio
async def test_load_unknown_module(registry):
    assert await registry.load_module("compfilter_examples.does_not_exist") is False
    assert registry.commands == []


@pytest.mark.usefixtures("no_default_config")
@pytest.mark.asyncio
async def test_load_config(registry, definitions_dir):
    config = {
        "compfilter": {"definitions_dirs": [str(definitions_dir)]},
        "mytool": {"targets": "smoke\nslow", "max_fields": 1},
    }
    await registry.load_config(config)
    definition = registry.definitions["mytool"]
    assert definition.targets == ["smoke", "slow"]
    assert definition.config.get_int("max_fields") == 1


@pytest.mark.usefixtures("no_default_config")
@pytest.mark.asyncio
async def test_load_config_paths(registry, tmp_path):
    package = tmp_path / "extra_defs"
    package.mkdir()
    (package / "__init__.py").write_text("")
    (package / "other.py").write_text(
        "from compfilter.definition import Definition\n"
        "from compfilter.models import CompletionReply\n\n\n"
        "class Extension(Definition):\n"
        "    commands = ['other']\n\n"
        "    def complete(self, request):\n"
        "        return CompletionReply(['ok'])\n"
    )
    config = {"compfilter": {"definitions_paths": [str(tmp_path)], "definitions": ["extra_defs.other"]}}
    await registry.load_config(config)
    assert registry.commands == ["other"]
    assert registry.complete(_request("other", "")).suggestions == ["ok"]


@pytest.mark.usefixtures("no_default_config")
@pytest.mark.asyncio
async def test_load_config_default_directory(registry, definitions_dir, monkeypatch):
    monkeypatch.setattr("compfilter.registry.DEFINITIONS_DIR", definitions_dir)
    await registry.load_config({"compfilter": {}})
    assert registry.commands == ["mytool"]
