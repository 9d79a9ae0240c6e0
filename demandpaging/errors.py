"""Exception hierarchy for the demand paging simulator"""


class DemandPagingError(Exception):
    """Base class for every error raised by the simulator"""


class ConfigError(DemandPagingError):
    """Malformed run configuration (sizes, job mix, algorithm name, preset)"""


class RandomSourceError(DemandPagingError):
    """Random number file could not be read or holds an invalid entry"""


class RandomSequenceExhausted(RandomSourceError):
    """Random number sequence ran out before the simulation finished"""


class FrameTableEmptyError(DemandPagingError):
    """Eviction was requested while the frame table holds no page"""
