class TrecError(Exception):
    """Base class for all errors"""


class TrecFatalError(TrecError):
    """Fatal error. Abort the entire process"""


class TrecConfigError(TrecError):
    """Error raised while parsing config"""
