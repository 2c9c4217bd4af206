"""Tests for the file-backed structure repository and RCSB download."""

import io
import urllib.error

import pytest

from molmesh.domain.exceptions import MalformedRecordError, StructureFetchError
from molmesh.infrastructure.repositories import structure_repository
from molmesh.infrastructure.repositories.structure_repository import (
    StructureRepository,
    fetch_rcsb,
)


@pytest.fixture
def data_dir(tmp_path, two_carbon_pdb, dipeptide_pdb, triangle_obj):
    (tmp_path / "ethane.pdb").write_text(two_carbon_pdb)
    (tmp_path / "dipeptide.pdb").write_text(dipeptide_pdb)
    (tmp_path / "tri.obj").write_text(triangle_obj)
    (tmp_path / "notes.txt").write_text("ignored")
    return tmp_path


def test_get_structure(data_dir):
    repo = StructureRepository(str(data_dir))
    graph = repo.get("ethane")

    assert len(graph.atoms) == 2
    assert len(graph.bonds) == 1


def test_get_missing_returns_none(data_dir):
    repo = StructureRepository(str(data_dir))
    assert repo.get("nothing") is None
    assert repo.get_mesh("nothing") is None


def test_list_in_id_order(data_dir):
    repo = StructureRepository(str(data_dir))

    assert repo.ids() == ["dipeptide", "ethane"]
    assert [len(g.atoms) for g in repo.list()] == [8, 2]


def test_get_mesh(data_dir):
    mesh = StructureRepository(str(data_dir)).get_mesh("tri")
    assert mesh.triangle_count == 1


def test_malformed_file_propagates(tmp_path):
    (tmp_path / "bad.pdb").write_text("ATOM      1  CA  ALA A   1      xx.xxx   0.000   0.000")
    with pytest.raises(MalformedRecordError):
        StructureRepository(str(tmp_path)).get("bad")


def test_writes_not_supported(data_dir):
    repo = StructureRepository(str(data_dir))
    graph = repo.get("ethane")
    with pytest.raises(NotImplementedError):
        repo.create(graph)
    with pytest.raises(NotImplementedError):
        repo.update(graph)
    with pytest.raises(NotImplementedError):
        repo.delete("ethane")


@pytest.mark.parametrize("pdb_id", ["", "1CR", "1CRN5", "1C-N"])
def test_fetch_rejects_bad_identifier(pdb_id):
    with pytest.raises(StructureFetchError):
        fetch_rcsb(pdb_id)


class FakeResponse(io.BytesIO):
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


def test_fetch_builds_url_and_decodes(monkeypatch, two_carbon_pdb):
    requested = []

    def fake_urlopen(url, timeout):
        requested.append((url, timeout))
        return FakeResponse(two_carbon_pdb.encode("utf-8"))

    monkeypatch.setattr(structure_repository.urllib.request, "urlopen", fake_urlopen)

    assert fetch_rcsb(" 1crn ", timeout=5) == two_carbon_pdb
    assert requested == [("https://files.rcsb.org/download/1CRN.pdb", 5)]

    graph = StructureRepository(".").fetch("1crn")
    assert len(graph.bonds) == 1


def test_fetch_http_error(monkeypatch):
    def fake_urlopen(url, timeout):
        raise urllib.error.HTTPError(url, 404, "Not Found", None, None)

    monkeypatch.setattr(structure_repository.urllib.request, "urlopen", fake_urlopen)

    with pytest.raises(StructureFetchError, match="404"):
        fetch_rcsb("0XXX")


def test_fetch_network_error(monkeypatch):
    def fake_urlopen(url, timeout):
        raise urllib.error.URLError("unreachable")

    monkeypatch.setattr(structure_repository.urllib.request, "urlopen", fake_urlopen)

    with pytest.raises(StructureFetchError, match="1CRN"):
        fetch_rcsb("1CRN")


def test_fetch_non_utf8_body(monkeypatch):
    monkeypatch.setattr(
        structure_repository.urllib.request,
        "urlopen",
        lambda url, timeout: FakeResponse(b"\xff\xfe"),
    )

    with pytest.raises(StructureFetchError, match="UTF-8"):
        fetch_rcsb("1CRN")


def test_non_utf8_file_is_malformed(tmp_path):
    (tmp_path / "latin1.pdb").write_bytes(b"REMARK caf\xe9\n")
    with pytest.raises(MalformedRecordError, match="UTF-8"):
        StructureRepository(str(tmp_path)).get("latin1")
