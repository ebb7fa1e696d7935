import json
import os
from functools import lru_cache
from typing import Any, Dict, Tuple

from jsonschema import validate, ValidationError

# Path: wildwatch/client/schemas/
SCHEMA_DIR = os.path.join(
    os.path.dirname(__file__),
    "schemas"
)

RESPONSE_SCHEMA = "analysis_response.json"


@lru_cache(maxsize=None)
def load_schema(filename: str = RESPONSE_SCHEMA) -> Dict[str, Any]:
    """
    Load a JSON schema file shipped with the client.
    """
    path = os.path.join(SCHEMA_DIR, filename)

    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_response(body: Any) -> Tuple[bool, str]:
    """
    Validate a relay response body against the analysis schema.

    Returns:
        (True, "") if valid
        (False, "<error message>") if invalid
    """
    try:
        validate(instance=body, schema=load_schema())
        return True, ""
    except ValidationError as e:
        return False, e.message
    except Exception as e:
        return False, f"Schema load/validation error: {e}"
