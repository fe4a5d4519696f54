class DatasetEditorError(Exception):
    """Base exception for all dataset_editor errors"""
    pass

class ConfigError(DatasetEditorError):
    """Invalid or inconsistent settings (env vars, settings file)"""
    pass

class UnknownOperationError(DatasetEditorError):
    """No transformation operation registered under the requested name"""
    pass

class InvalidPageRangeError(DatasetEditorError):
    """
    Custom page range outside the aggregated series
    start < 1, end < start, or either bound past the total count
    """
    pass

class UnknownChartError(DatasetEditorError, KeyError):
    """No chart view registered under the requested id"""
    pass
