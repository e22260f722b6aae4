"""
Shared constants used across the project.
"""

from typing import Final

# Build layout
DEFAULT_BUILD_DIR: Final[str] = "_build"
DEFAULT_PROFILE: Final[str] = "test"
COMPILE_SUBDIR: Final[str] = "lib"

# Environment overrides for the build layout
ENV_BUILD_DIR: Final[str] = "EUNIT_BUILD_DIR"
ENV_PROFILE: Final[str] = "EUNIT_PROFILE"
ENV_APPS: Final[str] = "EUNIT_APPS"
ENV_TEST_SUFFIX: Final[str] = "EUNIT_TEST_SUFFIX"

# Module discovery
UNIT_EXTENSION: Final[str] = ".py"
DEFAULT_TEST_SUFFIX: Final[str] = "_test"
NON_MODULE_FILES: Final[frozenset[str]] = frozenset({
    "__init__.py", "conftest.py"
})

# Artifacts written to the app output root
COVERDATA_FILENAME: Final[str] = "eunit.coverdata"
SUREFIRE_REPORT_NAME: Final[str] = "TEST-eunit.xml"

# Process exit codes
EXIT_OK: Final[int] = 0
EXIT_TESTS_FAILED: Final[int] = 1
EXIT_INVALID_ARGUMENT: Final[int] = 2
EXIT_TASK_ERROR: Final[int] = 3
