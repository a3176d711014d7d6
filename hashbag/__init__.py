from hashbag.interface.bag import BUCKET_COUNT, Bag

__all__ = [
    "Bag",
    "BUCKET_COUNT",
]
