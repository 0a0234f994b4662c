import os
import tempfile

# Keep test runs out of the per-user log folder. Loggers are configured at
# import time, so this must run before swisspairing is imported.
os.environ.setdefault(
    "SWISSPAIRING_LOG_DIR", os.path.join(tempfile.gettempdir(), "swiss-pairing-tests")
)
