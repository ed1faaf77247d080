class OptionalError(Exception):
    pass


class InvalidValueError(OptionalError):
    def __init__(self, message: str = "Optional value is invalid"):
        super(InvalidValueError, self).__init__(message)
        self.message = message

    def __repr__(self):
        return "<InvalidValueError: {}>".format(self.message)


__all__ = ["OptionalError", "InvalidValueError"]
