from __future__ import annotations

import importlib

import pytest

from ipview import module_discovery
from ipview.module_discovery import discover_modules
from ipview.module_executor import ModuleExecutor, module_executor
from ipview.modules.base import BaseModule


def test_discovers_both_lookup_modules():
    modules = discover_modules()

    assert set(modules) == {"IPify", "IPapi"}
    assert all(isinstance(module, BaseModule) for module in modules.values())
    assert modules["IPapi"].get_config()["source_url"] == "https://ipapi.co"


def test_missing_modules_directory(tmp_path):
    assert discover_modules(str(tmp_path / "nowhere")) == {}


def test_unknown_module_name():
    with pytest.raises(LookupError):
        module_executor.get_module("Shodan")


class EchoModule(BaseModule):
    MODULE_NAME = "Echo"

    async def query(self, observable=None, **kwargs):
        return {"raw_data": observable, "kwargs": kwargs}

    def normalize(self, raw_result):
        return raw_result["raw_data"].upper(), raw_result["kwargs"]


class BrokenModule(BaseModule):
    MODULE_NAME = "Broken"

    async def query(self, observable=None, **kwargs):
        raise ConnectionError("down")

    def normalize(self, raw_result):
        raise AssertionError("normalize should not run")


@pytest.mark.asyncio
async def test_execute_module_queries_then_normalizes():
    executor = ModuleExecutor({"Echo": EchoModule()})

    assert await executor.execute_module("Echo", "abc", timeout=3) == ("ABC", {"timeout": 3})


@pytest.mark.asyncio
async def test_execute_module_reraises_query_errors():
    executor = ModuleExecutor({"Broken": BrokenModule()})

    with pytest.raises(ConnectionError):
        await executor.execute_module("Broken", "abc")


def test_module_that_fails_to_import_is_skipped(monkeypatch):
    real_import = importlib.import_module

    def failing_import(name, *args, **kwargs):
        if name == "ipview.modules.ipapi":
            raise RuntimeError("broken module")
        return real_import(name, *args, **kwargs)

    monkeypatch.setattr(module_discovery.importlib, "import_module", failing_import)

    assert set(discover_modules()) == {"IPify"}


def test_unimportable_module_directory_is_skipped(tmp_path):
    (tmp_path / "not_a_real_module").mkdir()

    assert discover_modules(str(tmp_path)) == {}
