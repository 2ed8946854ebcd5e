"""Global test fixtures."""

import os

# Keep a developer's own YAML config and data directory out of the test run.
# This must happen at module load time, before any test module builds a Config.
os.environ.pop("SAMPURNAN_CONFIG_FILE", None)
os.environ.pop("SAMPURNAN_ADMIN__TOKEN", None)
os.environ.pop("SAMPURNAN_STORY__API_KEY", None)
