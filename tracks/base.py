"""Base tracker interface consumed by the debugger.

The motion model and the existence probability estimation live in concrete
trackers; this module only fixes the queries the debugger relies on.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence
from uuid import UUID, uuid4

import numpy as np

from .types import DynamicObject
from .utils import uuid_to_string


class BaseTracker(ABC):
    """Abstract tracked object.

    Attributes:
        uuid: Persistent identity of the tracked object.
        existence_probabilities: Per-channel existence probabilities, one entry per
            configured channel.
        total_existence_probability: Overall existence confidence.
    """

    def __init__(
        self,
        channel_size: int,
        uuid: UUID | None = None,
        existence_probabilities: Sequence[float] | None = None,
        total_existence_probability: float = 0.0,
    ):
        """Initialize the tracker state shared by all implementations.

        Args:
            channel_size: Number of configured channels.
            uuid: Object identity; a random one is generated when omitted.
            existence_probabilities: Initial per-channel probabilities.
            total_existence_probability: Initial overall probability.
        """
        self.uuid = uuid if uuid is not None else uuid4()
        if existence_probabilities is None:
            self.existence_probabilities = np.zeros(channel_size, dtype=np.float64)
        else:
            self.existence_probabilities = np.asarray(existence_probabilities, dtype=np.float64)
        self.total_existence_probability = float(total_existence_probability)

    @abstractmethod
    def get_tracked_object(self, time: float) -> DynamicObject:
        """Return the estimated object state at the given time.

        Args:
            time: Query time in seconds.

        Returns:
            DynamicObject carrying this tracker's uuid and predicted position.
        """

    def get_uuid_string(self) -> str:
        return uuid_to_string(self.uuid)

    def get_existence_probability_vector(self) -> np.ndarray:
        return self.existence_probabilities.copy()

    def get_total_existence_probability(self) -> float:
        return self.total_existence_probability

    def __repr__(self):
        return f"{type(self).__name__}(uuid={self.get_uuid_string()[:6]})"
