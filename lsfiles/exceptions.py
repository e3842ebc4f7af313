class LsFilesError(Exception):
    # base exception for all application-specific errors.
    pass

class ConfigError(LsFilesError):
    # errors related to configuration.
    pass

class TraversalError(LsFilesError, OSError):
    # the traversal root could not be listed.
    pass

class OutputError(LsFilesError):
    # errors during output operations.
    pass
