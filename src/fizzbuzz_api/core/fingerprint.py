"""Order-independent fingerprints of request parameter sets.

Keys are sorted before serialization, so ``{"int1": 3, "int2": 5}`` and
``{"int2": 5, "int1": 3}`` hash identically. The digest is only used as a
statistics key; MD5 is enough for that.
"""

from __future__ import annotations

import hashlib
import json
from typing import Mapping, Union

from .models import ParameterSet, ParameterValue


def canonicalize(params: Union[ParameterSet, Mapping[str, ParameterValue]]) -> str:
    """Compact JSON with sorted keys, slashes escaped as "\\/"."""
    if isinstance(params, ParameterSet):
        params = params.to_dict()
    return json.dumps(dict(params), sort_keys=True, separators=(",", ":")).replace("/", "\\/")


def fingerprint(params: Union[ParameterSet, Mapping[str, ParameterValue]]) -> str:
    """Return the 32-character hex fingerprint of a parameter set."""
    return hashlib.md5(canonicalize(params).encode("utf-8"), usedforsecurity=False).hexdigest()
