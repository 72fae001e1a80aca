corpus = dict(
    extensions=(".jpg",),
)
orb = dict(
    max_features=500,
    scale_factor=1.2,
    n_levels=8,
    edge_threshold=31,
    patch_size=31,
    fast_threshold=20,
)
scorer = dict(
    distance_threshold=30,
    weight=0.1,
    acceptance_floor=20,
)
capture = dict(
    device=0,
    poll_interval=0.1,
)
