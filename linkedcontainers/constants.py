"""Default constants for container construction and storage."""

# LinkedMap
DEFAULT_CAPACITY = 0                    # 0 = unbounded

# Ordered store arena
ARENA_INITIAL_SLOTS = 16
ARENA_GROWTH_FACTOR = 2
NIL = -1                                # end-of-chain marker for arena links
