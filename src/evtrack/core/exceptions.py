class InvalidArgument(ValueError):
    """ Raised when a caller passes an out-of-range interval or window setting. """
