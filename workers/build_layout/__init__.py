"""
build_layout — output-directory relocation and JVM target selection
for multi-module Android/Gradle builds.

Profile: android-gradle-jvm (see policy/profile.py)
"""

__version__ = "0.1.0"
LAYOUT_VERSION = "v1"
PACKAGE_NAME = "build_layout"
SCHEMA_VERSION = "0.1"
