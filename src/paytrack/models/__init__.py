"""ORM table mappers. Importing this package registers every table."""
from paytrack.models.kv import KeyValue

__all__ = ["KeyValue"]
