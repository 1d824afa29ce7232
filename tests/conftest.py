"""Shared pytest fixtures and configuration for the mvn-quickstart test suite.

Guidelines
----------
* No test spawns Maven — subprocess is mocked at the infra boundary.
* No test reads the real ``~/.m2`` or the real environment.
* No test waits on a terminal — prompts are mocked.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from mvn_quickstart.core.generate_service import GenerateService
from mvn_quickstart.core.models import ProjectRequest


class FakeGenerator:
    """Generator double recording every request it is asked to generate."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.requests: list[ProjectRequest] = []

    def build_command(self, request: ProjectRequest) -> list[str]:
        return ["fake-mvn", request.group_id, request.artifact_id]

    def generate(self, request: ProjectRequest) -> int:
        self.requests.append(request)
        return self.returncode


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo ``configure_logging`` calls made by CLI tests."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def standard_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def base_pom_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def fake_service(
    monkeypatch: pytest.MonkeyPatch,
    standard_generator: FakeGenerator,
    base_pom_generator: FakeGenerator,
) -> GenerateService:
    """Route the CLI to fake generators and skip the Maven preflight."""
    from mvn_quickstart.cli import app as app_module

    service = GenerateService(standard=standard_generator, base_pom=base_pom_generator)
    monkeypatch.setattr(app_module, "_build_generate_service", lambda: service)
    monkeypatch.setattr(app_module, "_run_preflight", lambda: None)
    return service


@pytest.fixture
def archetype_cache(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the archetype cache lookup at a temporary, existing directory."""
    from mvn_quickstart.infra import maven_detector

    cache = tmp_path / "m2" / "archetypes"
    cache.mkdir(parents=True)
    monkeypatch.setattr(maven_detector, "archetype_cache_path", lambda: cache)
    return cache


@pytest.fixture
def missing_archetype_cache(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the archetype cache lookup at a directory that does not exist."""
    from mvn_quickstart.infra import maven_detector

    cache = tmp_path / "m2" / "missing"
    monkeypatch.setattr(maven_detector, "archetype_cache_path", lambda: cache)
    return cache
