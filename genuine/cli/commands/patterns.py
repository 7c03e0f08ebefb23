"""
Pattern commands - ``genuine check`` and ``genuine match``.

The functions here return plain data; ``__main__`` renders it.
"""

import logging
from typing import Any, Dict, List

from genuine.patterns import ParseError, Pattern
from genuine.routing import normalize_path

logger = logging.getLogger("genuine.cli")


def check_patterns(patterns: List[str]) -> List[Dict[str, Any]]:
    """Compile each pattern, collecting parts or the diagnostic."""
    results = []
    for raw in patterns:
        try:
            compiled = Pattern.compile(raw)
        except ParseError as exc:
            logger.debug("Pattern %r failed to compile: %s", raw, exc)
            results.append({
                "pattern": raw,
                "ok": False,
                "error": {
                    "kind": exc.__class__.__name__,
                    "message": exc.message,
                    "pos": exc.pos,
                },
                "diagnostic": exc.format(),
            })
            continue
        results.append({"ok": True, "diagnostic": None, **compiled.to_dict(), "pattern": raw})
    return results


def match_paths(pattern: Pattern, paths: List[str], normalize: bool = True) -> List[Dict[str, Any]]:
    """Try each path against ``pattern``."""
    results = []
    for path in paths:
        candidate = normalize_path(path) if normalize else path
        matches = pattern.try_match(candidate)
        results.append({
            "path": path,
            "matched": matches is not None,
            "params": [m.to_dict() for m in matches] if matches is not None else None,
        })
    return results
