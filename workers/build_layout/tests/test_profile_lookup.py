"""test_profile_lookup — built-in profile registry."""
import pytest

from build_layout.policy.profile import DEFAULT_PROFILE, LayoutProfile, get_profile


class TestGetProfile:

    def test_short_names(self):
        assert get_profile("v1") == LayoutProfile.v1()
        assert get_profile("v2") == LayoutProfile.v2()

    def test_full_profile_id(self):
        assert get_profile("android-gradle-jvm-v2") == LayoutProfile.v2()

    def test_default_is_v1(self):
        assert get_profile(DEFAULT_PROFILE).profile_id == "android-gradle-jvm-v1"

    def test_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown layout profile"):
            get_profile("v9")
