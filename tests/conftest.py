"""Pytest configuration, in-memory fakes of the ports, and shared fixtures."""

from __future__ import annotations

import asyncio
from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from app.adapters.persistence.database import get_session
from app.application.ports.demo_repo import DemoRepository
from app.application.ports.sequence_allocator import SequenceAllocator
from app.domain.entities.demo import Demo
from app.domain.errors import DuplicateKeyError, StorageUnavailableError
from app.infrastructure.api.dependencies import get_demo_repo, get_sequence_allocator
from app.main import app

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeSequenceAllocator(SequenceAllocator):
    """Counter dict; read and write happen without an await in between."""

    def __init__(self, unavailable: bool = False):
        self.counters: dict[str, int] = {}
        self.unavailable = unavailable
        self.calls = 0

    async def next_value(self, name):
        self.calls += 1
        # Yield so concurrent callers interleave around the increment.
        await asyncio.sleep(0)
        if self.unavailable:
            raise StorageUnavailableError("Database unavailable: connection refused")
        value = self.counters.get(name, 0) + 1
        self.counters[name] = value
        await asyncio.sleep(0)
        return value


class FakeDemoRepo(DemoRepository):
    def __init__(self, demos: list[Demo] | None = None):
        self.demos: dict[int, Demo] = {d.id: d for d in demos or []}

    async def get_all(self, search=None):
        if not search:
            return list(self.demos.values())
        needle = search.lower()
        return [d for d in self.demos.values() if needle in d.name.lower()]

    async def get_by_id(self, demo_id):
        await asyncio.sleep(0)
        return self.demos.get(demo_id)

    async def create(self, demo):
        await asyncio.sleep(0)
        if demo.id in self.demos:
            raise DuplicateKeyError(demo.id)
        self.demos[demo.id] = demo
        return demo

    async def update(self, demo_id, values):
        # Yield first so concurrent updates interleave; the merge itself is atomic.
        await asyncio.sleep(0)
        current = self.demos.get(demo_id)
        if current is None:
            return None
        updated = replace(current, **values)
        self.demos[demo_id] = updated
        return updated

    async def delete(self, demo_id):
        return self.demos.pop(demo_id, None)

    async def delete_many(self, ids):
        removed = [i for i in ids if self.demos.pop(i, None) is not None]
        return len(removed)


class FakeSession:
    def __init__(self):
        self.commits = 0
        self.commit_error: Exception | None = None

    async def commit(self):
        if self.commit_error:
            raise self.commit_error
        self.commits += 1

    async def rollback(self):
        pass


# ─── Fixtures ────────────────────────────────────────────────────────


@pytest.fixture
def allocator():
    return FakeSequenceAllocator()


@pytest.fixture
def demo_repo():
    return FakeDemoRepo()


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def client(allocator, demo_repo, fake_session):
    """TestClient with the SQL adapters swapped for the in-memory fakes."""
    app.dependency_overrides[get_session] = lambda: fake_session
    app.dependency_overrides[get_demo_repo] = lambda: demo_repo
    app.dependency_overrides[get_sequence_allocator] = lambda: allocator
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_demo():
    def _make(demo_id, name="Widget", description="", price=0.0, category=""):
        return Demo(
            id=demo_id, name=name, description=description,
            price=price, category=category,
        )

    return _make


@pytest.fixture
def make_repo():
    """Build a FakeDemoRepo pre-loaded with the given demos."""
    return FakeDemoRepo


@pytest.fixture
def failing_allocator():
    return FakeSequenceAllocator(unavailable=True)
