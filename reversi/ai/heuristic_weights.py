"""Weights for the one-ply lookahead strategy.

:class:`~reversi.ai.lookahead.MinimizeOpponentAdvantageStrategy` scores a
position from the opponent's point of view as a weighted sum of three
signals:

* ``corner``: the opponent can take a corner,
* ``avoid_corner``: the opponent has a move not next to a corner,
* ``multi_capture``: the opponent has a move flipping more than one disc.

The defaults (3 / 2 / 1) rank the signals; they have not been tuned for
playing strength.

Overrides can be supplied through the ``REVERSI_LOOKAHEAD_WEIGHTS``
environment variable as a JSON object, e.g.::

    export REVERSI_LOOKAHEAD_WEIGHTS='{"corner": 5, "multi_capture": 0}'

Keys not present keep their defaults.
"""

from __future__ import annotations

import json
import logging
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

LOOKAHEAD_WEIGHTS_ENV = "REVERSI_LOOKAHEAD_WEIGHTS"


class LookaheadWeights(BaseModel):
    """Opponent-advantage weights"""
    model_config = ConfigDict(frozen=True, extra="forbid")

    corner: int = Field(3, ge=0)
    avoid_corner: int = Field(2, ge=0)
    multi_capture: int = Field(1, ge=0)


DEFAULT_LOOKAHEAD_WEIGHTS = LookaheadWeights()


def get_lookahead_weights() -> LookaheadWeights:
    """Return the defaults merged with any ``$REVERSI_LOOKAHEAD_WEIGHTS`` override."""
    raw = os.getenv(LOOKAHEAD_WEIGHTS_ENV)
    if not raw:
        return DEFAULT_LOOKAHEAD_WEIGHTS
    try:
        overrides = json.loads(raw)
        weights = LookaheadWeights(**overrides)
    except (json.JSONDecodeError, TypeError, ValidationError) as e:
        raise ConfigurationError(
            f"Invalid {LOOKAHEAD_WEIGHTS_ENV}: {e}",
            context={"value": raw},
        ) from e
    logger.info("Using lookahead weights from %s: %s", LOOKAHEAD_WEIGHTS_ENV, weights)
    return weights
