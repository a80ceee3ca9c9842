"""JSON reporter for scripting and CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from giturl.core.models import GitURL
from giturl.core.parser import InvalidURLError


def to_dict(
    urls: Sequence[GitURL],
    errors: Sequence[InvalidURLError] = (),
    *,
    show_raw: bool = True,
) -> Dict[str, Any]:
    """Convert parse results to a JSON-serialisable dict."""
    url_list: List[Dict[str, Any]] = []
    for url in urls:
        data = url.to_dict()
        if not show_raw:
            data.pop("raw")
        url_list.append(data)

    return {
        "version": "1.0",
        "total": len(urls) + len(errors),
        "urls": url_list,
        "errors": [{"url": e.raw, "reason": e.reason} for e in errors],
    }


def render(
    urls: Sequence[GitURL],
    errors: Sequence[InvalidURLError] = (),
    *,
    show_raw: bool = True,
) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(urls, errors, show_raw=show_raw), indent=2)
