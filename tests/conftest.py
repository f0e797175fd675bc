"""Root conftest: shared test configuration."""

import os

# Tests must not pick up a developer's ENVELOPE_CLIENT_* overrides
for _key in [k for k in os.environ if k.upper().startswith("ENVELOPE_CLIENT_")]:
    del os.environ[_key]
