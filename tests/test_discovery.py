import os

from conftest import POSIX_ONLY, make_executable

from pylaunch.discovery import (
    Candidate,
    all_executables,
    directory_contents,
    filter_python_executables,
    iter_candidates,
    split_search_path,
)
from pylaunch.version import Exact, MajorOnly


class TestSplitSearchPath:
    def test_keeps_order(self):
        value = os.pathsep.join(["/usr/local/bin", "/usr/bin", "/bin"])
        assert [str(p) for p in split_search_path(value)] == [
            "/usr/local/bin",
            "/usr/bin",
            "/bin",
        ]

    def test_drops_empty_and_repeated_entries(self):
        value = os.pathsep.join(["/usr/bin", "", "/bin", "/usr/bin"])
        assert [str(p) for p in split_search_path(value)] == ["/usr/bin", "/bin"]

    def test_empty_value(self):
        assert split_search_path("") == []


class TestDirectoryContents:
    def test_lists_direct_entries(self, bin_dir):
        make_executable(bin_dir, "python3.6")
        (bin_dir / "nested").mkdir()
        make_executable(bin_dir / "nested", "python3.7")

        contents = directory_contents(bin_dir)

        assert sorted(contents) == [bin_dir / "nested", bin_dir / "python3.6"]

    def test_entries_are_absolute(self, bin_dir, monkeypatch):
        make_executable(bin_dir, "python3")
        monkeypatch.chdir(bin_dir.parent)

        assert all(p.is_absolute() for p in directory_contents("bin"))

    def test_missing_directory_is_empty(self, tmp_path):
        assert directory_contents(tmp_path / "missing") == []

    def test_file_instead_of_directory_is_empty(self, bin_dir):
        path = make_executable(bin_dir, "python3")
        assert directory_contents(path) == []


class TestFilterPythonExecutables:
    def test_keeps_versioned_names(self, tmp_path):
        paths = [
            tmp_path / "python3",
            tmp_path / "python3.6",
            tmp_path / "python42.13",
        ]
        assert list(filter_python_executables(paths)) == [
            Candidate(MajorOnly(3), tmp_path / "python3"),
            Candidate(Exact(3, 6), tmp_path / "python3.6"),
            Candidate(Exact(42, 13), tmp_path / "python42.13"),
        ]

    def test_skips_other_names(self, tmp_path):
        paths = [
            tmp_path / name
            for name in (
                "python",
                "python3-config",
                "python3.8m",
                "python3.6.4",
                "pythonw",
                "ruby2.7",
                "ipython3",
            )
        ]
        assert list(filter_python_executables(paths)) == []


class TestIterCandidates:
    def test_directory_order_is_preserved(self, tmp_path):
        first = make_executable(tmp_path / "a", "python3.6")
        second = make_executable(tmp_path / "b", "python3.6")

        candidates = list(iter_candidates([tmp_path / "a", tmp_path / "b"]))

        assert [c.path for c in candidates] == [first, second]

    def test_missing_and_repeated_directories_are_skipped(self, tmp_path):
        only = make_executable(tmp_path / "a", "python3")

        candidates = list(
            iter_candidates([tmp_path / "missing", tmp_path / "a", tmp_path / "a"])
        )

        assert candidates == [Candidate(MajorOnly(3), only)]


class TestAllExecutables:
    def test_first_occurrence_wins(self, tmp_path):
        first = make_executable(tmp_path / "a", "python3.6")
        make_executable(tmp_path / "b", "python3.6")
        other = make_executable(tmp_path / "b", "python3.7")

        found = all_executables([tmp_path / "a", tmp_path / "b"])

        assert found == {Exact(3, 6): first, Exact(3, 7): other}

    @POSIX_ONLY
    def test_dangling_links_are_skipped(self, bin_dir, tmp_path):
        (bin_dir / "python3.9").symlink_to(tmp_path / "nowhere")
        real = make_executable(bin_dir, "python3.8")

        assert all_executables([bin_dir]) == {Exact(3, 8): real}

    def test_directories_named_like_pythons_are_skipped(self, bin_dir):
        (bin_dir / "python3.9").mkdir()
        assert all_executables([bin_dir]) == {}
