from pidgeot.models.record import Record

__all__ = [
    "Record",
]
