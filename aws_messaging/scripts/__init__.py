"""Zero-argument entry points, one AWS call each.

Edit the placeholder parameters in each module before running it.
"""

import json
from typing import Any


def print_response(response: dict[str, Any]) -> None:
    """Print a raw boto3 response as indented JSON."""
    print(json.dumps(response, indent=2, default=str))
