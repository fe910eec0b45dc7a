"""
test_manifest — loading a LayoutProfile from a JSON manifest.
"""
import json

import pytest
from pydantic import ValidationError

from build_layout.io.manifest import ProfileManifest, load_profile_manifest
from build_layout.policy.profile import LayoutProfile
from build_layout.policy.target import CompilerTarget, JvmTarget, select_target


class TestLoadProfileManifest:

    def test_valid_manifest(self, manifest_file):
        profile = load_profile_manifest(manifest_file)

        assert profile.profile_id == "custom"
        assert profile.legacy_projects == frozenset({"legacy_lib"})
        assert profile.legacy_jvm == JvmTarget.JVM_1_8
        assert profile.current_jvm == JvmTarget.JVM_21
        assert select_target("legacy_lib", profile.legacy_projects) == CompilerTarget.LEGACY

    def test_defaults_filled(self, manifest_file):
        profile = load_profile_manifest(manifest_file)

        assert profile.relocated_build_dir == "../../build"
        assert profile.repositories == ("google", "mavenCentral")
        assert profile.evaluation_anchor == "app"

    def test_same_content_as_builtin(self, tmp_path):
        p = tmp_path / "v1.json"
        p.write_text(json.dumps({
            "profile_id": "android-gradle-jvm-v1",
            "legacy_projects": ["device_calendar", "receive_sharing_intent", "workmanager_android"],
        }))
        assert load_profile_manifest(p) == LayoutProfile.v1()

    def test_null_anchor(self, tmp_path):
        p = tmp_path / "m.json"
        p.write_text(json.dumps({
            "profile_id": "no-anchor",
            "legacy_projects": [],
            "evaluation_anchor": None,
        }))
        assert load_profile_manifest(p).evaluation_anchor is None

    def test_missing_legacy_projects(self, tmp_path):
        p = tmp_path / "m.json"
        p.write_text(json.dumps({"profile_id": "broken"}))
        with pytest.raises(ValidationError):
            load_profile_manifest(p)

    def test_unknown_jvm_level(self, tmp_path):
        p = tmp_path / "m.json"
        p.write_text(json.dumps({
            "profile_id": "broken",
            "legacy_projects": [],
            "legacy_jvm": "1.6",
        }))
        with pytest.raises(ValidationError):
            load_profile_manifest(p)

    def test_not_json(self, tmp_path):
        p = tmp_path / "m.json"
        p.write_text("legacy_projects = [device_calendar]")
        with pytest.raises(ValueError):
            load_profile_manifest(p)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_profile_manifest(tmp_path / "absent.json")

    def test_schema_version_mismatch_logs_warning(self, tmp_path, caplog):
        p = tmp_path / "m.json"
        p.write_text(json.dumps({
            "schema_version": "9.9",
            "profile_id": "future",
            "legacy_projects": [],
        }))
        with caplog.at_level("WARNING", logger="build_layout.io.manifest"):
            load_profile_manifest(p)
        assert "9.9" in caplog.text


class TestProfileManifestModel:

    def test_duplicates_collapse_in_profile(self):
        m = ProfileManifest(profile_id="dup", legacy_projects=["a", "a", "b"])
        assert m.to_profile().legacy_projects == frozenset({"a", "b"})
