class HrBrowserError(Exception):
    """Base exception for all hr_browser errors"""
    pass

class ConfigError(HrBrowserError):
    """Invalid or inconsistent global.json (e.g. a click source mapped to an unknown dimension)"""
    pass

class DatasetSchemaError(HrBrowserError):
    """
    Loaded table doesn't carry the columns the filter engine needs
    missing filter columns, or missing inputs for derived groups
    """
    pass
