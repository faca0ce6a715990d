from timegrid.models.kv_entry import KeyValueEntry  # noqa: F401
