from datazoom.adapters.normalize import normalize_columns

__all__ = ["normalize_columns"]
