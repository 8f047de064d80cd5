# Velocity Parameter Configuration

# Velocity Domain (consistent speed unit, shared with the motion planner)
VELOCITY_MIN = 0.0
VELOCITY_MAX = 80.0

# Edge Tile Time Buffer (s)
# (lower, upper, buffer) - adjacent buckets share their boundary value
EDGE_TILE_TIME_BUFFER_BUCKETS = (
    (0.0, 15.0, 0.3),
    (15.0, 30.0, 0.5),
    (30.0, 45.0, 0.7),
    (45.0, 55.0, 0.9),
    (55.0, 65.0, 1.1),
    (65.0, 75.0, 1.3),
    (75.0, 80.0, 1.5),
)

# Minimum Following Distance
# (lower, upper, distance)
MINIMUM_FOLLOWING_DISTANCE_BUCKETS = (
    (0.0, 15.0, 0.5),
    (15.0, 30.0, 0.6),
    (30.0, 45.0, 0.9),
    (45.0, 55.0, 1.1),
    (55.0, 65.0, 1.2),
    (65.0, 75.0, 1.3),
    (75.0, 80.0, 1.5),
)

# Table names used in lookup errors
EDGE_TILE_TIME_BUFFER_TABLE = "edge_tile_time_buffer"
MINIMUM_FOLLOWING_DISTANCE_TABLE = "minimum_following_distance"
