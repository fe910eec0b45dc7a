"""
test_clean — deleting the relocated root build directory.

Invariants:
  - An existing directory is removed with its contents.
  - Cleaning an absent directory succeeds (idempotent).
  - Other filesystem errors propagate.
"""
import pytest

from build_layout.core.clean import clean_build_dir, register_clean_task


class TestCleanBuildDir:

    def test_removes_tree(self, tmp_path):
        root = tmp_path / "build"
        (root / "app" / "intermediates").mkdir(parents=True)
        (root / "app" / "intermediates" / "classes.jar").write_bytes(b"\x00")

        clean_build_dir(root)

        assert not root.exists()
        assert tmp_path.exists()

    def test_twice_in_a_row(self, tmp_path):
        root = tmp_path / "build"
        root.mkdir()

        clean_build_dir(root)
        clean_build_dir(root)

        assert not root.exists()

    def test_absent_directory(self, tmp_path):
        clean_build_dir(tmp_path / "never_created")

    def test_file_in_place_of_directory_propagates(self, tmp_path):
        target = tmp_path / "build"
        target.write_text("not a directory")

        with pytest.raises(OSError):
            clean_build_dir(target)
        assert target.exists()


class TestRegisterCleanTask:

    def test_returns_zero_arg_callable(self, tmp_path):
        root = tmp_path / "build"
        root.mkdir()

        clean = register_clean_task(root)
        assert root.exists()

        assert clean() is None
        assert not root.exists()
        clean()
