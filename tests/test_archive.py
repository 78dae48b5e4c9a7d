import zipfile

import pytest

from projman.archive import zip_project_folder


@pytest.fixture
def project_tree(tmp_path):
    root = tmp_path / "PRJ-1"
    (root / "Docs").mkdir(parents=True)
    (root / "Logs" / "deep").mkdir(parents=True)
    (root / "Empty").mkdir()
    (root / "project.yaml").write_text("id: PRJ-1\n")
    (root / "Docs" / "readme.txt").write_text("hello docs")
    (root / "Logs" / "deep" / "run.log").write_bytes(b"\x00\x01binary")
    return root


def test_archive_contains_all_files_with_relative_names(tmp_path, project_tree):
    dest = tmp_path / "out.zip"
    zip_project_folder(project_tree, dest)
    with zipfile.ZipFile(dest) as archive:
        names = set(archive.namelist())
    expected = {
        p.relative_to(project_tree).as_posix()
        for p in project_tree.rglob("*")
        if p.is_file()
    }
    assert names == expected


def test_archive_contents_round_trip(tmp_path, project_tree):
    dest = tmp_path / "out.zip"
    zip_project_folder(str(project_tree), str(dest))
    with zipfile.ZipFile(dest) as archive:
        for p in project_tree.rglob("*"):
            if p.is_file():
                rel = p.relative_to(project_tree).as_posix()
                assert archive.read(rel) == p.read_bytes()


def test_empty_directories_are_not_recorded(tmp_path, project_tree):
    dest = tmp_path / "out.zip"
    zip_project_folder(project_tree, dest)
    with zipfile.ZipFile(dest) as archive:
        assert all(not name.startswith("Empty") for name in archive.namelist())


def test_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        zip_project_folder(tmp_path / "absent", tmp_path / "out.zip")