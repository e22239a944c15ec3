class InvalidArgumentError(ValueError):
    """Raised when an argument fails validation.

    Args:
        param (str): name of the offending argument.
        reason (str): what is wrong with it.
    """
    def __init__(self, param, reason):
        super().__init__("{}: {}".format(param, reason))
        self.param = param
        self.reason = reason


class IndexOutOfRangeError(IndexError):
    """Raised when an index falls outside of a sequence."""
    def __init__(self, index, size):
        super().__init__(
            "index {} out of range for sequence of size {}".format(
                index, size))
        self.index = index
        self.size = size
