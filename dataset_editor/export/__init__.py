from .tabular_export import to_csv, to_dataframe, to_records

__all__ = ["to_csv", "to_dataframe", "to_records"]
