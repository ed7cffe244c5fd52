import os
import sys

# Make `import coordsanitizer` work when pytest is run from the repo root
# without an editable install.
SRC_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if SRC_ROOT not in sys.path:
    sys.path.insert(0, SRC_ROOT)
