import os
import tempfile

# Settings are read at import time, so the environment is prepared before any
# patchcanvas module is imported by the test modules.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="patchcanvas-logs-"))
os.environ.setdefault("ENVIRONMENT", "test")
