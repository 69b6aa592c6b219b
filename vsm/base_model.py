"""
Pydantic base model for vsm's records and results.

Session entries, requests, results and the persisted config are values: built
once per run, compared by field, never changed afterwards.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """
    Frozen, strictly typed model that rejects unknown fields.

    Rejecting unknown fields is what turns a typo in a hand-edited config.json
    into a ConfigError instead of a silently ignored key.
    """

    model_config = ConfigDict(extra='forbid', strict=True, frozen=True)
