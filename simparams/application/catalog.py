import logging
from functools import lru_cache
from pydantic import BaseModel, ConfigDict

from simparams.domain import config
from simparams.domain.range_table import RangeTable

logger = logging.getLogger(__name__)

class VelocityParameterCatalog(BaseModel):
    """Velocity dependent safety parameters consumed by motion planning.

    Both tables cover velocities in [VELOCITY_MIN, VELOCITY_MAX]; lookups
    outside that domain raise RangeNotFound and the caller decides whether to
    clamp, reject or escalate.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    edge_tile_time_buffer: RangeTable
    minimum_following_distance: RangeTable

    @classmethod
    def build(cls) -> "VelocityParameterCatalog":
        catalog = cls(
            edge_tile_time_buffer=RangeTable.build(
                config.EDGE_TILE_TIME_BUFFER_BUCKETS,
                name=config.EDGE_TILE_TIME_BUFFER_TABLE,
            ),
            minimum_following_distance=RangeTable.build(
                config.MINIMUM_FOLLOWING_DISTANCE_BUCKETS,
                name=config.MINIMUM_FOLLOWING_DISTANCE_TABLE,
            ),
        )
        logger.info(
            "Velocity parameter catalog built (velocity domain [%s, %s])",
            config.VELOCITY_MIN, config.VELOCITY_MAX,
        )
        return catalog

@lru_cache(maxsize=None)
def get_catalog() -> VelocityParameterCatalog:
    """Process-wide catalog, built on first access and shared afterwards."""
    return VelocityParameterCatalog.build()

def edge_tile_time_buffer_for(velocity: float) -> float:
    return get_catalog().edge_tile_time_buffer.lookup(velocity)

def minimum_following_distance_for(velocity: float) -> float:
    return get_catalog().minimum_following_distance.lookup(velocity)
