"""Tests for SvcsController."""

import re

import pytest

from svcs.core.controller import SvcsController
from svcs.core.errors import (
    CorruptLogError,
    DetachedHeadError,
    NothingToCommitError,
    NotFoundError,
    UnconfiguredError,
    UsageError,
)
from svcs.core.types import CommitHash


@pytest.fixture
def temp_project(tmp_path):
    """Create a temporary project directory."""
    project = tmp_path / "project"
    project.mkdir()

    (project / "foo").write_text("abc")
    (project / "bar").write_text("xyz")

    return project


@pytest.fixture
def controller(temp_project):
    """Create a controller with a configured author."""
    controller = SvcsController(project_root=temp_project)
    controller.set_author("Mat")
    return controller


class TestConfig:
    def test_no_author(self, temp_project):
        assert SvcsController(project_root=temp_project).get_author() is None

    def test_set_author(self, controller, temp_project):
        assert controller.get_author() == "Mat"
        assert (temp_project / "vcs" / "config.txt").read_text() == "name: Mat\n"
        assert SvcsController(project_root=temp_project).get_author() == "Mat"

    def test_non_ascii_author(self, temp_project):
        SvcsController(project_root=temp_project).set_author("José")

        config_file = temp_project / "vcs" / "config.txt"
        assert config_file.read_bytes() == "name: José\n".encode("utf-8")
        assert SvcsController(project_root=temp_project).get_author() == "José"

    def test_author_with_line_separator_character(self, temp_project):
        SvcsController(project_root=temp_project).set_author("Ma\u2028t")

        assert SvcsController(project_root=temp_project).get_author() == "Ma\u2028t"

    @pytest.mark.parametrize("name", ["", "  ", "a:b", "two\nlines"])
    def test_rejects_bad_names(self, controller, name):
        with pytest.raises(UsageError):
            controller.set_author(name)


class TestAdd:
    def test_add_tracks_files(self, controller):
        assert controller.add(["foo", "bar"]) == ["foo", "bar"]
        assert controller.tracked_files() == ["bar", "foo"]

    def test_add_missing_file(self, controller):
        """A missing file leaves the index untouched."""
        with pytest.raises(NotFoundError):
            controller.add(["foo", "missing"])

        assert controller.tracked_files() == []
        assert not controller.layout.index_file.exists()

    def test_add_outside_repository(self, controller, tmp_path):
        (tmp_path / "outside").write_text("nope")

        with pytest.raises(UsageError):
            controller.add(["../outside"])

    def test_add_directory(self, controller, temp_project):
        (temp_project / "src").mkdir()

        with pytest.raises(UsageError):
            controller.add(["src"])

    def test_add_vcs_files(self, controller):
        with pytest.raises(UsageError):
            controller.add(["vcs/config.txt"])

    def test_add_normalizes_paths(self, controller, temp_project):
        (temp_project / "src").mkdir()
        (temp_project / "src" / "main.py").write_text("pass")

        assert controller.add(["./src/../src/main.py"]) == ["src/main.py"]
        assert controller.add([str(temp_project / "foo")]) == ["foo"]

    def test_add_twice_is_not_staged(self, controller):
        """Re-adding a committed, unmodified file doesn't stage it."""
        controller.add(["foo"])
        controller.commit("first")

        controller.add(["foo"])

        assert controller.load_index().staged_files() == set()

    def test_add_path_with_line_separator_character(self, controller, temp_project):
        (temp_project / "a\u2028b.txt").write_text("abc")

        controller.add(["a\u2028b.txt"])

        assert controller.tracked_files() == ["a\u2028b.txt"]
        assert controller.load_index().staged_files() == {"a\u2028b.txt"}

    @pytest.mark.parametrize("path", ["a\nb", "a\rb"])
    def test_add_rejects_line_breaks(self, controller, path):
        with pytest.raises(UsageError):
            controller.add([path])

        assert not controller.layout.index_file.exists()

    def test_non_ascii_path_is_committed(self, controller, temp_project):
        (temp_project / "café.txt").write_text("crème")
        controller.add(["café.txt"])

        result = controller.commit("first")

        assert controller.tracked_files() == ["café.txt"]
        assert controller.store.list_files(result.commit_hash) == ["café.txt"]
        assert controller.load_index().staged_files() == set()


class TestCommit:
    def test_first_commit(self, controller, temp_project):
        controller.add(["foo"])

        result = controller.commit("first")

        log_text = (temp_project / "vcs" / "log.txt").read_text()
        assert re.match(r"^[0-9a-f]+ \| Mat: first$", log_text.rstrip("\n"))
        assert log_text.startswith(result.commit_hash.value)
        assert controller.head.get() == result.commit_hash
        commit_dir = temp_project / "vcs" / "commits" / result.commit_hash.value
        assert (commit_dir / "foo").read_text() == "abc"
        assert result.file_count == 1
        assert result.staged_count == 1

    def test_commit_updates_index(self, controller):
        controller.add(["foo", "bar"])
        controller.commit("first")

        assert controller.load_index().staged_files() == set()

    def test_snapshot_contains_all_tracked_files(self, controller, temp_project):
        controller.add(["foo", "bar"])
        controller.commit("first")
        (temp_project / "bar").write_text("changed")

        result = controller.commit("second")

        assert result.staged_count == 1
        assert controller.store.list_files(result.commit_hash) == ["bar", "foo"]

    def test_missing_message(self, controller):
        controller.add(["foo"])

        for message in (None, "", "   "):
            with pytest.raises(UsageError):
                controller.commit(message)

    def test_multiline_message(self, controller):
        controller.add(["foo"])

        with pytest.raises(UsageError):
            controller.commit("one\ntwo")

    def test_unconfigured_author(self, temp_project):
        controller = SvcsController(project_root=temp_project)
        controller.add(["foo"])

        with pytest.raises(UnconfiguredError) as exc:
            controller.commit("first")
        assert "svcs config" in exc.value.hint

    def test_nothing_to_commit(self, controller):
        with pytest.raises(NothingToCommitError):
            controller.commit("empty")

        controller.add(["foo"])
        controller.commit("first")

        with pytest.raises(NothingToCommitError):
            controller.commit("again")
        assert len(controller.list_log()) == 1

    def test_detached_head_blocks_commit(self, controller, temp_project):
        controller.add(["foo"])
        first = controller.commit("first").commit_hash
        (temp_project / "foo").write_text("v2")
        second = controller.commit("second").commit_hash

        controller.checkout(first.value)
        (temp_project / "foo").write_text("v3")

        with pytest.raises(DetachedHeadError) as exc:
            controller.commit("third")
        assert exc.value.latest == second.value
        assert second.value in exc.value.message
        assert len(controller.list_log()) == 2

    def test_hash_independent_of_staging_order(self, tmp_path):
        hashes = []
        for name, order in (("one", ["a", "b"]), ("two", ["b", "a"])):
            project = tmp_path / name
            project.mkdir()
            (project / "a").write_text("A")
            (project / "b").write_text("B")
            controller = SvcsController(project_root=project)
            controller.set_author("Mat")
            for path in order:
                controller.add([path])
            hashes.append(controller.commit("same").commit_hash)

        assert hashes[0] == hashes[1]

    def test_identical_commit_reuses_hash(self, controller, temp_project):
        """Same message and staged content give the same hash again."""
        controller.add(["foo"])
        first = controller.commit("msg").commit_hash
        (temp_project / "foo").write_text("other")
        controller.commit("other")
        (temp_project / "foo").write_text("abc")

        again = controller.commit("msg").commit_hash

        assert again == first
        entries = controller.list_log()
        assert len(entries) == 3
        assert entries[0].commit_hash == entries[2].commit_hash


class TestLog:
    def test_newest_first(self, controller, temp_project):
        controller.add(["foo"])
        controller.commit("first")
        (temp_project / "foo").write_text("v2")
        controller.commit("second")

        assert [e.message for e in controller.list_log()] == ["second", "first"]

    def test_empty(self, controller):
        assert controller.list_log() == []


class TestCheckout:
    def test_round_trip(self, controller, temp_project):
        controller.add(["foo"])
        first = controller.commit("first").commit_hash
        (temp_project / "foo").write_text("v2")
        controller.commit("second")

        result = controller.checkout(first.value)
        assert result.commit_hash == first
        assert (temp_project / "foo").read_text() == "abc"
        assert controller.head.get() == first

        controller.checkout("latest")
        assert (temp_project / "foo").read_text() == "v2"

        controller.checkout(first.value)
        assert (temp_project / "foo").read_text() == "abc"

    def test_checkout_current_commit_is_noop(self, controller, temp_project):
        controller.add(["foo"])
        first = controller.commit("first").commit_hash
        (temp_project / "foo").write_text("uncommitted")

        result = controller.checkout(first.value)

        assert result.files_written == 0
        assert controller.head.get() == first
        assert (temp_project / "foo").read_text() == "uncommitted"

    def test_two_commits_scenario(self, controller, temp_project):
        controller.add(["foo", "bar"])
        first = controller.commit("first").commit_hash
        (temp_project / "bar").write_text("bar v2")
        controller.commit("second")

        controller.checkout(first.value)
        assert (temp_project / "bar").read_text() == "xyz"

        controller.checkout("latest")
        assert (temp_project / "bar").read_text() == "bar v2"
        assert (temp_project / "foo").read_text() == "abc"

    def test_file_added_later_is_kept_on_checkout_back(self, controller, temp_project):
        controller.add(["foo"])
        first = controller.commit("first").commit_hash
        controller.add(["bar"])
        (temp_project / "bar").write_text("bar v2")
        controller.commit("second")

        controller.checkout(first.value)

        assert (temp_project / "foo").read_text() == "abc"
        assert (temp_project / "bar").read_text() == "bar v2"

    def test_untracked_files_survive(self, controller, temp_project):
        (temp_project / "notes.txt").write_text("keep me")
        controller.add(["foo"])
        first = controller.commit("first").commit_hash
        (temp_project / "foo").write_text("v2")
        controller.commit("second")

        controller.checkout(first.value)

        assert (temp_project / "notes.txt").read_text() == "keep me"

    def test_nested_paths(self, controller, temp_project):
        (temp_project / "src").mkdir()
        (temp_project / "src" / "main.py").write_text("v1")
        controller.add(["src/main.py"])
        first = controller.commit("first").commit_hash
        (temp_project / "src" / "main.py").write_text("v2")
        controller.commit("second")

        controller.checkout(first.value)

        assert (temp_project / "src" / "main.py").read_text() == "v1"

    def test_checkout_back_then_commit_after_latest(self, controller, temp_project):
        controller.add(["foo"])
        first = controller.commit("first").commit_hash
        (temp_project / "foo").write_text("v2")
        controller.commit("second")
        controller.checkout(first.value)
        controller.checkout("latest")
        (temp_project / "foo").write_text("v3")

        result = controller.commit("third")

        assert controller.head.get() == result.commit_hash

    def test_missing_ref(self, controller):
        for ref in (None, "", " "):
            with pytest.raises(UsageError):
                controller.checkout(ref)

    def test_unknown_ref(self, controller):
        controller.add(["foo"])
        controller.commit("first")

        with pytest.raises(NotFoundError):
            controller.checkout("deadbeef")

    def test_latest_without_commits(self, controller):
        with pytest.raises(NotFoundError):
            controller.checkout("latest")

    def test_corrupt_log(self, controller):
        controller.add(["foo"])
        controller.commit("first")
        with open(controller.layout.log_file, "a") as f:
            f.write("garbage\n")

        with pytest.raises(CorruptLogError):
            controller.checkout("latest")

    def test_missing_head_file(self, controller):
        controller.add(["foo"])
        first = controller.commit("first").commit_hash
        controller.layout.head_file.unlink()

        with pytest.raises(CorruptLogError):
            controller.checkout(first.value)
        assert controller.head.get() is None

    def test_checkout_does_not_touch_index(self, controller, temp_project):
        controller.add(["foo"])
        first = controller.commit("first").commit_hash
        (temp_project / "foo").write_text("v2")
        second = controller.commit("second").commit_hash
        index_text = controller.layout.index_file.read_text()

        controller.checkout(first.value)

        assert controller.layout.index_file.read_text() == index_text
        assert controller.head.get() != second
        assert isinstance(controller.head.get(), CommitHash)
