"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, integration).
"""

import logging

# The contentful SDK and urllib3 log every request at DEBUG/INFO level
logging.getLogger("contentful").setLevel(logging.WARNING)
logging.getLogger("urllib3").setLevel(logging.WARNING)
