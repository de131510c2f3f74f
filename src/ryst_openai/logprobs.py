"""Decoding of the ``top_logprobs`` field of completion choices."""
from collections.abc import Mapping
from typing import Any


def flatten_top_logprobs(entries: Any) -> Any:
    """Fold the API's list of ``{token: logprob}`` maps into a single dict.

    Entries are merged in list order, so a token that appears in more than one
    entry keeps the value of the last one. Mappings pass through unchanged.
    Anything else is left for pydantic to reject.
    """
    if isinstance(entries, Mapping) or not isinstance(entries, (list, tuple)):
        return entries
    result: dict[str, Any] = {}
    for i, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ValueError(f"top_logprobs[{i}] must be a map of token to logprob")
        # last write wins on duplicate tokens
        result.update(entry)
    return result
