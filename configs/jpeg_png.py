_base_ = [
    './default.py',
]
corpus = dict(
    extensions=(".jpg", ".jpeg", ".png"),
)
scorer = dict(
    acceptance_floor=15,
)
