import os
import sys

# Sessions stay in memory during tests
os.environ.setdefault("USE_REDIS", "false")

# Add project root to path for proper imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
