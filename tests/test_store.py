import json

import pytest
from pydantic import ValidationError

from recruiting_mcp import store

pytestmark = pytest.mark.anyio


async def test_load_candidates_reads_file_in_order(candidates_file, stored_candidates):
    candidates = await store.load_candidates(candidates_file)
    assert [c.to_json() for c in candidates] == stored_candidates


async def test_candidates_path_from_environment(monkeypatch, candidates_file):
    monkeypatch.setenv("CANDIDATES_PATH", str(candidates_file))
    assert store.get_candidates_path() == candidates_file
    candidates = await store.load_candidates()
    assert [c.id for c in candidates] == ["cand-1", "cand-2"]


async def test_bundled_pipeline_loads(monkeypatch):
    monkeypatch.delenv("CANDIDATES_PATH", raising=False)
    candidates = await store.load_candidates()
    assert candidates
    assert all(c.id and c.name for c in candidates)
    assert len({c.id for c in candidates}) == len(candidates)


async def test_malformed_store_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('[{"name": "No Id"}]', encoding="utf-8")
    with pytest.raises(ValidationError):
        await store.load_candidates(path)


async def test_missing_store_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        await store.load_candidates(tmp_path / "nope.json")


async def test_sparse_records_come_back_unchanged(tmp_path):
    stored = [{"id": "c1", "name": "Jo", "stage": "Offer"}, {"id": "c2", "name": "Al", "skills": []}]
    path = tmp_path / "sparse.json"
    path.write_text(json.dumps(stored), encoding="utf-8")
    candidates = await store.load_candidates(path)
    assert [c.to_json() for c in candidates] == stored
